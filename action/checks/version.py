"""Version number check.

A release version should have exactly three components (major.minor.patch).
A fourth component such as .9000 marks an unreleased development version.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from descriptor import load_package, parse_version
from status import CheckResult, check_status


def check_version(pkg=".", out=None) -> CheckResult:
    pkg = load_package(pkg)
    return check_status(
        "version number has three components",
        lambda: len(parse_version(pkg.version)) == 3,
        f"version ({pkg.version}) should have exactly three components",
        out=out,
    )
