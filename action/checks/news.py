"""NEWS file checks.

CRAN renders NEWS.md directly, so once a package has one it should neither be
excluded from the build via .Rbuildignore nor shadowed by a legacy
inst/NEWS.Rd.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from descriptor import load_package
from status import CheckResult, check_status

# Plain substrings, not patterns: the escaped form is what usethis writes
NEWS_IGNORE_MARKERS = ("NEWS\\.md", "NEWS.md")


def read_build_ignore(path: Path) -> list[str]:
    """Lines of .Rbuildignore, or an empty list when there is none."""
    ignore_file = path / ".Rbuildignore"
    if not ignore_file.exists():
        return []
    return ignore_file.read_text(encoding="utf-8", errors="replace").splitlines()


def news_is_ignored(ignore_lines: list[str]) -> bool:
    return any(marker in line for line in ignore_lines for marker in NEWS_IGNORE_MARKERS)


def check_news_md(pkg=".", out=None) -> list[CheckResult]:
    """Both checks are skipped when the package has no NEWS.md."""
    pkg = load_package(pkg)
    if not (pkg.path / "NEWS.md").exists():
        return []

    return [
        check_status(
            "NEWS.md is not ignored",
            lambda: not news_is_ignored(read_build_ignore(pkg.path)),
            "NEWS.md now supported by CRAN and doesn't need to be ignored.",
            out=out,
        ),
        check_status(
            "NEWS.Rd does not exist",
            lambda: not (pkg.path / "inst" / "NEWS.Rd").exists(),
            "NEWS.md now supported by CRAN, NEWS.Rd can be removed.",
            out=out,
        ),
    ]
