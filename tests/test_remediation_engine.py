# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the remediation engine and its strategies.
"""

import pytest

from html_accessibility_checker.remediate import remediation_manager
from html_accessibility_checker.remediate.catalog import RemediationRule, RuleScope
from html_accessibility_checker.remediate.remediation_manager import RemediationEngine
from html_accessibility_checker.utils.html_utils import DocumentTree
from html_accessibility_checker.utils.logging_helper import AccessibilityRemediationError
from html_accessibility_checker.utils.report_models import (
    AuditCategory,
    DEBUG_MARKER,
    FixMode,
)


def first_body_element(tree):
    return tree.body.find(True, recursive=False)


class TestCatalogScenarios:
    """One finding per rule, checked against the serialized document."""

    def test_adds_empty_alt_to_image(self, run_autofix, make_finding):
        tree, _ = run_autofix('<img src="foo.png">', [make_finding("image-alt", "img")])
        assert 'alt=""' in tree.serialize()

    def test_sets_document_language(self, run_autofix, make_finding):
        html = "<!DOCTYPE html><html><head></head><body></body></html>"
        tree, _ = run_autofix(html, [make_finding("html-has-lang", "html")])
        assert 'lang="en"' in tree.serialize()

    def test_adds_label_for_input(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<form><input type="text"></form>', [make_finding("label", "input")]
        )
        label = tree.query_one("label")
        field = tree.query_one("input")
        assert label is not None
        assert field["id"] == "text-input-1"
        assert label["for"] == "text-input-1"
        assert label.find_next_sibling("input") is field

    def test_adds_h1_for_heading_order(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            "<body><h2>Subheading</h2><h3>Another</h3></body>",
            [make_finding("heading-order")],
        )
        assert "<h1>" in tree.serialize()

    def test_adds_region_role(self, run_autofix, make_finding):
        tree, _ = run_autofix("<section></section>", [make_finding("aria-roles", "section")])
        assert 'role="region"' in tree.serialize()

    def test_adds_outline_for_low_contrast(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<span style="color:#fff;background:#fff">Text</span>',
            [make_finding("color-contrast", "span")],
        )
        style = tree.query_one("span")["style"]
        assert style == "color:#fff;background:#fff; outline: 2px solid #000000"

    def test_outline_keeps_semicolons_inside_values(self, run_autofix, make_finding):
        style = "background: url(data:image/png;base64,AAAA) no-repeat; color: #777"
        tree, _ = run_autofix(
            f'<span style="{style}">Sale</span>',
            [make_finding("color-contrast", "span")],
        )
        assert tree.query_one("span")["style"] == style + "; outline: 2px solid #000000"

    def test_existing_outline_is_skipped(self, run_autofix, make_finding):
        html = '<span style="color:#777; outline: 2px solid #000000;">x</span>'
        tree, outcome = run_autofix(html, [make_finding("color-contrast", "span")])
        assert tree.query_one("span")["style"] == "color:#777; outline: 2px solid #000000;"
        assert "color-contrast" not in [fix.type for fix in outcome.applied_fixes]

    def test_removes_positive_tabindex(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<button tabindex="2">Btn</button>', [make_finding("tabindex", "button")]
        )
        assert "tabindex" not in tree.serialize()

    def test_adds_skip_link_as_first_body_element(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<body><main id="main"></main></body>', [make_finding("skip-link")]
        )
        link = first_body_element(tree)
        assert link.name == "a"
        assert link.get_text() == "Skip to main content"
        assert link["href"] == "#main"

    def test_skip_link_targets_generated_main(self, run_autofix, make_finding):
        tree, _ = run_autofix("<body><p>Text</p></body>", [make_finding("skip-link")])
        link = first_body_element(tree)
        main = tree.query_one("main")
        assert link["href"] == f"#{main['id']}"
        assert main["id"] == "main-content"

    def test_adds_main_landmark(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            "<body><div>Content</div></body>", [make_finding("landmark-one-main")]
        )
        main = tree.query_one("main")
        assert main is not None
        assert main.find("div").get_text() == "Content"

    def test_adds_name_to_empty_link(self, run_autofix, make_finding):
        tree, _ = run_autofix('<a href="#"></a>', [make_finding("link-name", "a")])
        assert "Descriptive link" in tree.serialize()

    def test_adds_name_to_empty_button(self, run_autofix, make_finding):
        tree, _ = run_autofix("<button></button>", [make_finding("button-name", "button")])
        assert tree.query_one("button")["aria-label"] == "Button"

    def test_promotes_first_row_to_headers(self, run_autofix, make_finding):
        html = "<table><tr><td>Name</td><td>Age</td></tr><tr><td>Ann</td><td>7</td></tr></table>"
        tree, _ = run_autofix(html, [make_finding("table-headers", "table")])
        headers = tree.query_all("th")
        assert [th.get_text() for th in headers] == ["Name", "Age"]
        assert all(th["scope"] == "col" for th in headers)
        assert len(tree.query_all("td")) == 2


class TestFormLabels:
    def test_label_text_from_placeholder(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<input type="email" placeholder="Your email">', [make_finding("label", "input")]
        )
        assert tree.query_one("label").get_text() == "Your email"
        assert tree.query_one("input")["id"] == "email-input-1"

    def test_label_text_from_name(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<input type="text" name="promo_code">', [make_finding("label", "input")]
        )
        assert tree.query_one("label").get_text() == "Promo Code"

    def test_existing_id_is_kept(self, run_autofix, make_finding):
        tree, _ = run_autofix(
            '<input type="text" id="city">', [make_finding("label", "#city")]
        )
        assert tree.query_one("label")["for"] == "city"

    def test_wrapped_field_is_skipped(self, run_autofix, make_finding):
        tree, outcome = run_autofix(
            '<label>Name <input type="text"></label>', [make_finding("label", "input")]
        )
        assert len(tree.query_all("label")) == 1
        assert not [f for f in outcome.applied_fixes if f.type == "label"]

    def test_multiple_labels_keep_first(self, run_autofix, make_finding):
        html = '<label for="x">A</label><label for="x">B</label><input id="x">'
        tree, outcome = run_autofix(html, [make_finding("form-field-multiple-label", "#x")])
        labels = tree.query_all("label")
        assert labels[0]["for"] == "x"
        assert not labels[1].has_attr("for")
        assert [f.type for f in outcome.applied_fixes][-1] == "form-field-multiple-label"


class TestAriaRoles:
    def test_invalid_role_is_replaced(self, run_autofix, make_finding):
        tree, outcome = run_autofix(
            '<div role="bogus">x</div>', [make_finding("aria-roles", "[role=bogus]")]
        )
        assert tree.query_one("div")["role"] == "region"
        assert any("invalid role" in m for m in outcome.messages)

    def test_valid_role_is_kept(self, run_autofix, make_finding):
        tree, outcome = run_autofix(
            '<div role="navigation">x</div>', [make_finding("aria-valid-attr", "div")]
        )
        assert tree.query_one("div")["role"] == "navigation"
        assert not [f for f in outcome.applied_fixes if f.type == "aria-role"]


class TestDuplicateIds:
    def test_later_holders_are_renamed(self, run_autofix, make_finding):
        html = '<p id="dup">a</p><p id="dup">b</p><span id="dup">c</span>'
        tree, outcome = run_autofix(html, [make_finding("duplicate-id", "p", "span")])
        ids = [tree.query_one("p")["id"], tree.query_all("p")[1]["id"], tree.query_one("span")["id"]]
        assert ids == ["dup", "dup-1", "dup-2"]
        assert len([f for f in outcome.applied_fixes if f.type == "duplicate-id"]) == 2

    def test_unique_id_is_skipped(self, run_autofix, make_finding):
        tree, outcome = run_autofix('<p id="solo">a</p>', [make_finding("duplicate-id", "p")])
        assert tree.query_one("p")["id"] == "solo"
        assert any("already unique" in m for m in outcome.messages)


IDEMPOTENCE_CASES = [
    ('<img src="a.png">', "image-alt", ["img"]),
    ("<p>x</p>", "html-has-lang", []),
    ('<input type="text">', "label", ["input"]),
    ('<label for="x">A</label><label for="x">B</label><input id="x">', "form-field-multiple-label", ["#x"]),
    ("<h2>a</h2><h4>b</h4>", "heading-order", []),
    ('<section role="bogus">x</section>', "aria-roles", ["section"]),
    ('<section aria-foo="1">x</section>', "aria-valid-attr", ["section"]),
    ('<span style="color:#777">x</span>', "color-contrast", ["span"]),
    ('<button tabindex="3">Go</button>', "tabindex", ["button"]),
    ("<p>x</p>", "skip-link", []),
    ("<main>a</main><main>b</main>", "landmark-one-main", []),
    ("<div>loose</div>", "region", []),
    ('<a href="/x"></a>', "link-name", ["a"]),
    ("<button></button>", "button-name", ["button"]),
    ("<table><tr><td>A</td></tr></table>", "table-headers", ["table"]),
    ('<p id="d">a</p><p id="d">b</p>', "duplicate-id", ["p"]),
]


class TestIdempotence:
    @pytest.mark.parametrize("html,rule_id,targets", IDEMPOTENCE_CASES)
    def test_second_pass_changes_nothing(self, html, rule_id, targets, make_finding):
        tree = DocumentTree.parse(html)
        findings = [make_finding(rule_id, *targets)]
        engine = RemediationEngine()

        first = engine.remediate(tree, findings)
        after_first = tree.serialize()
        second = engine.remediate(tree, findings)

        assert first.applied_fixes
        assert second.applied_fixes == []
        assert tree.serialize() == after_first
        assert all(e.category != AuditCategory.APPLIED.value for e in second.audit_log)


class TestBaseline:
    def test_baseline_invariant_without_findings(self, run_autofix, broken_page):
        tree, _ = run_autofix(broken_page, [])

        titles = tree.query_all("title")
        assert len(titles) == 1 and titles[0].get_text(strip=True)
        assert tree.root.get("lang")
        mains = tree.query_all('main, [role="main"]')
        assert len(mains) == 1
        headings = tree.query_all("h1")
        assert headings
        assert all(any(p is mains[0] for p in h.parents) for h in headings)

    def test_title_comes_from_first_h1(self, run_autofix):
        tree, _ = run_autofix("<body><h1>Quarterly report</h1></body>", [])
        assert tree.query_one("title").get_text() == "Quarterly report"

    def test_empty_title_is_filled(self, run_autofix):
        tree, outcome = run_autofix("<head><title> </title></head><body></body>", [])
        assert tree.query_one("title").get_text() == "Untitled document"
        assert any("empty document title" in m for m in outcome.messages)

    def test_svg_title_is_not_the_document_title(self, run_autofix):
        html = (
            "<head><title></title></head>"
            "<body><main><h1>Cart</h1><svg><title>Cart icon</title></svg></main></body>"
        )
        tree, _ = run_autofix(html, [])

        assert tree.head.find("title").get_text() == "Cart"
        assert tree.query_one("svg title").get_text() == "Cart icon"

    def test_svg_titles_are_not_removed_as_duplicates(self, run_autofix):
        html = (
            "<head><title>Shop</title></head>"
            "<body><svg><title>Cart</title></svg><svg><title>Search</title></svg></body>"
        )
        tree, outcome = run_autofix(html, [])

        assert [t.get_text() for t in tree.query_all("svg title")] == ["Cart", "Search"]
        assert tree.head.find("title").get_text() == "Shop"
        assert not any("duplicate <title>" in m for m in outcome.messages)

    def test_h1_is_moved_into_main(self, run_autofix):
        tree, _ = run_autofix("<body><h1>Top</h1><main><p>x</p></main></body>", [])
        main = tree.query_one("main")
        assert main.find(True) is tree.query_one("h1")

    def test_extra_main_is_demoted(self, run_autofix):
        tree, _ = run_autofix("<main>a</main><main>b</main>", [])
        assert len(tree.query_all("main")) == 1
        assert tree.query_one("div").get_text() == "b"

    def test_configured_defaults_are_used(self, run_autofix):
        tree, _ = run_autofix(
            "<p>x</p>", [], options={"default_language": "fr", "default_title": "Accueil"}
        )
        assert tree.root["lang"] == "fr"
        assert tree.query_one("title").get_text() == "Accueil"
        assert tree.query_one("h1").get_text() == "Accueil"

    def test_applied_fixes_pair_with_log_entries(self, run_autofix, make_finding, broken_page):
        _, outcome = run_autofix(broken_page, [make_finding("image-alt", "img")])
        applied = [e for e in outcome.audit_log if e.category == AuditCategory.APPLIED.value]
        assert len(applied) == len(outcome.applied_fixes)


class TestEngineBehaviour:
    def test_unmatched_selector_is_logged_when_verbose(self, run_autofix, make_finding):
        _, outcome = run_autofix(
            "<p>x</p>", [make_finding("image-alt", "img.missing")], verbose=True
        )
        debug = [e for e in outcome.audit_log if e.is_debug]
        assert any("matched no elements" in e.message for e in debug)
        assert all(e.message.startswith(DEBUG_MARKER) for e in debug)

    def test_debug_entries_dropped_when_not_verbose(self, run_autofix, make_finding):
        _, outcome = run_autofix("<p>x</p>", [make_finding("image-alt", "img.missing")])
        assert not [e for e in outcome.audit_log if e.is_debug]

    def test_invalid_selector_does_not_raise(self, run_autofix, make_finding):
        _, outcome = run_autofix(
            "<img src='a.png'>", [make_finding("image-alt", "img[")], verbose=True
        )
        assert any("Invalid selector" in e.message for e in outcome.audit_log)

    def test_unknown_finding_is_ignored(self, run_autofix, make_finding):
        tree, outcome = run_autofix("<p>x</p>", [make_finding("page-has-heading-one", "html")])
        assert len(tree.query_all("h1")) == 1
        assert "page-has-heading-one" in [f.type for f in outcome.applied_fixes]

    def test_dry_run_and_apply_mutate_alike(self, run_autofix, make_finding, broken_page):
        findings = [make_finding("image-alt", "img"), make_finding("link-name", "a")]
        dry_tree, _ = run_autofix(broken_page, findings, mode=FixMode.DRY_RUN)
        applied_tree, _ = run_autofix(broken_page, findings, mode=FixMode.APPLY)
        assert dry_tree.serialize() == applied_tree.serialize()

    def test_rule_failure_is_raised_as_remediation_error(self, monkeypatch, make_finding):
        def broken_rule(context, element):
            raise ValueError("bad markup")

        rule = RemediationRule(
            name="image-alt",
            finding_ids=("image-alt",),
            scope=RuleScope.PER_MATCH,
            apply=broken_rule,
        )
        monkeypatch.setitem(remediation_manager.RULES_BY_FINDING_ID, "image-alt", [rule])
        tree = DocumentTree.parse('<img src="a.png">')

        expected = "Remediation rule 'image-alt' failed"
        with pytest.raises(AccessibilityRemediationError, match=expected) as exc_info:
            RemediationEngine().remediate(tree, [make_finding("image-alt", "img")])
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_report_only_is_rejected(self, make_finding):
        tree = DocumentTree.parse("<p>x</p>")
        with pytest.raises(AccessibilityRemediationError):
            RemediationEngine().remediate(tree, [], mode=FixMode.REPORT_ONLY)
