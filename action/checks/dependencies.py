"""Development-version dependency check.

R packages mark in-development versions with a fourth version component of
9000 or more (e.g. 1.2.0.9000). Depending on such a version means the package
cannot be installed from CRAN alone.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from descriptor import DependencyEntry, PackageDescriptor, load_package, parse_deps, parse_version
from status import CheckResult, check_status

DEV_VERSION_THRESHOLD = 9000


def is_dev_version(version: str) -> bool:
    """True for four-component versions whose last component is >= 9000."""
    parts = parse_version(version)
    return len(parts) == 4 and parts[3] >= DEV_VERSION_THRESHOLD


def collect_versioned_deps(pkg: PackageDescriptor) -> list[DependencyEntry]:
    """All dependencies, across every dependency field, that carry a version constraint."""
    deps = []
    for raw in pkg.dependency_fields().values():
        deps.extend(d for d in parse_deps(raw) if d.version is not None)
    return deps


def find_dev_dependencies(pkg: PackageDescriptor) -> list[str]:
    return [d.name for d in collect_versioned_deps(pkg) if is_dev_version(d.version)]


def check_dev_versions(pkg=".", out=None) -> CheckResult:
    pkg = load_package(pkg)
    return check_status(
        "dependencies don't rely on dev versions",
        lambda: not find_dev_dependencies(pkg),
        lambda: "depends on devel versions of: " + ", ".join(find_dev_dependencies(pkg)),
        out=out,
    )
