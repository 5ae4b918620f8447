"""Remotes field check.

Remotes points installers at GitHub or other non-CRAN sources; CRAN does not
accept packages that declare it.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from descriptor import load_package
from status import CheckResult, check_status


def check_remotes(pkg=".", out=None) -> CheckResult:
    pkg = load_package(pkg)
    return check_status(
        "DESCRIPTION doesn't have Remotes field",
        lambda: not pkg.has_field("Remotes"),
        "Remotes field should be removed before CRAN submission.",
        out=out,
    )
