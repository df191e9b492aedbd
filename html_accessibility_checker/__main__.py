# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

import sys

from html_accessibility_checker.cli import main

sys.exit(main())
