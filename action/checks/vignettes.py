"""Vignette title check.

Vignettes generated from the usethis/devtools template start out with the
title "Vignette Title" in both the YAML header and %\\VignetteIndexEntry.
Only the header matters, so just the first VIGNETTE_HEADER_LINES lines of
each vignette are read.
"""

from itertools import islice
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from descriptor import find_vignette_files, load_package
from status import CheckResult, check_status

PLACEHOLDER_TITLE = "Vignette Title"
VIGNETTE_HEADER_LINES = 30


def has_placeholder_title(filepath: Path, n: int = VIGNETTE_HEADER_LINES) -> bool:
    """Check if any of the first n lines contain the placeholder title."""
    with open(filepath, encoding="utf-8", errors="replace") as f:
        return any(PLACEHOLDER_TITLE in line for line in islice(f, n))


def check_vignette_titles(pkg=".", out=None) -> CheckResult | None:
    """Returns None (and reports nothing) when the package has no vignettes."""
    pkg = load_package(pkg)
    vig_files = find_vignette_files(pkg.path)
    if not vig_files:
        return None

    def placeholders():
        return [vf.name for vf in vig_files if has_placeholder_title(vf)]

    return check_status(
        "vignette titles are not placeholders",
        lambda: not placeholders(),
        lambda: (
            "placeholder 'Vignette Title' detected in 'title' field and/or "
            "'VignetteIndexEntry' for: " + ",".join(placeholders())
        ),
        out=out,
    )
