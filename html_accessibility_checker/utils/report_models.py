# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pydantic models for scan findings, remediation records and per-document results.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any
from enum import Enum


class Impact(str, Enum):
    """Enum for finding impact levels."""

    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"


class FixMode(str, Enum):
    """How a checker run treats the remediated tree."""

    REPORT_ONLY = "report-only"
    DRY_RUN = "dry-run"
    APPLY = "apply"


class AuditCategory(str, Enum):
    """Display category of an audit log line."""

    APPLIED = "applied"
    SKIPPED = "skipped"
    DEBUG = "debug"
    OTHER = "other"


DEBUG_MARKER = "[autofix-debug]"


class NodeMatch(BaseModel):
    """One reported node, addressed by one or more selectors."""

    targets: List[str] = Field(default_factory=list)
    html: Optional[str] = None
    failure_summary: Optional[str] = None

    class Config:
        """Configuration for NodeMatch model."""

        frozen = True


class Finding(BaseModel):
    """A reported defect instance produced by the scanner."""

    id: str
    impact: Optional[Impact] = None
    description: str = ""
    help: str = ""
    help_url: str = ""
    tags: List[str] = Field(default_factory=list)
    nodes: List[NodeMatch] = Field(default_factory=list)

    class Config:
        """Configuration for Finding model."""

        frozen = True
        use_enum_values = True


class ScanResults(BaseModel):
    """Categorized scanner output for one document."""

    violations: List[Finding] = Field(default_factory=list)
    passes: List[Finding] = Field(default_factory=list)
    incomplete: List[Finding] = Field(default_factory=list)
    inapplicable: List[Finding] = Field(default_factory=list)


class AppliedFix(BaseModel):
    """Record of one mutation actually performed during a remediation pass."""

    type: str
    selector: str
    extra: Optional[Dict[str, Any]] = None


def classify_message(message: str) -> AuditCategory:
    """Categorize a raw log line by the wording conventions of the audit trail."""
    if message.startswith(DEBUG_MARKER):
        return AuditCategory.DEBUG
    lowered = message.lower()
    if "added" in lowered or "fixed" in lowered:
        return AuditCategory.APPLIED
    if "skipped" in lowered or "already" in lowered:
        return AuditCategory.SKIPPED
    return AuditCategory.OTHER


class AuditEntry(BaseModel):
    """
    One human-readable line of the remediation audit trail.

    Entries written by the engine carry their category explicitly; entries
    rebuilt from plain strings (e.g. a saved JSON report) are classified by
    wording.
    """

    message: str
    category: Optional[AuditCategory] = None

    class Config:
        """Configuration for AuditEntry model."""

        use_enum_values = True

    def model_post_init(self, __context: Any) -> None:
        if self.category is None:
            self.category = classify_message(self.message).value

    @property
    def is_debug(self) -> bool:
        return self.category == AuditCategory.DEBUG.value

    def __str__(self) -> str:
        return self.message


class RemediationOutcome(BaseModel):
    """What a remediation pass did to a document tree."""

    applied_fixes: List[AppliedFix] = Field(default_factory=list)
    audit_log: List[AuditEntry] = Field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [entry.message for entry in self.audit_log]


class DocumentResult(BaseModel):
    """Outcome of checking (and possibly remediating) one input document."""

    file: str
    violations: List[Finding] = Field(default_factory=list)
    passes: List[Finding] = Field(default_factory=list)
    incomplete: List[Finding] = Field(default_factory=list)
    inapplicable: List[Finding] = Field(default_factory=list)
    applied_fixes: List[AppliedFix] = Field(default_factory=list)
    autofix_log: List[AuditEntry] = Field(default_factory=list)
    mode: FixMode = FixMode.REPORT_ONLY
    error: Optional[str] = None
    backup_path: Optional[str] = None
    written: bool = False

    class Config:
        """Configuration for DocumentResult model."""

        use_enum_values = True

    @classmethod
    def from_error(cls, file: str, error: str) -> "DocumentResult":
        """Build the result recorded for an input that could not be processed."""
        return cls(file=file, error=error)

    def to_report_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape used by reports and templates."""
        data = {
            "file": self.file,
            "violations": [finding_to_dict(f) for f in self.violations],
            "passes": [finding_to_dict(f) for f in self.passes],
            "incomplete": [finding_to_dict(f) for f in self.incomplete],
            "inapplicable": [finding_to_dict(f) for f in self.inapplicable],
            "appliedFixes": [fix.model_dump(exclude_none=True) for fix in self.applied_fixes],
            "autofixLog": [entry.message for entry in self.autofix_log],
            "mode": self.mode,
        }
        if self.error:
            data["error"] = self.error
        if self.backup_path:
            data["backupPath"] = self.backup_path
        return data


def finding_to_dict(finding: Finding) -> Dict[str, Any]:
    """Serialize a finding using the scanner's camelCase field names."""
    return {
        "id": finding.id,
        "impact": finding.impact,
        "description": finding.description,
        "help": finding.help,
        "helpUrl": finding.help_url,
        "tags": list(finding.tags),
        "nodes": [
            {
                "target": list(node.targets),
                "html": node.html,
                "failureSummary": node.failure_summary,
            }
            for node in finding.nodes
        ],
    }

