"""inst/doc check.

Building vignettes locally (devtools::build_vignettes) leaves rendered output
in inst/doc. R CMD build regenerates it, so anything left there is stale.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from descriptor import load_package
from status import CheckResult, check_status


def list_doc_files(path: Path) -> list[str]:
    """Visible entries of inst/doc; hidden files are ignored like R's dir()."""
    doc_dir = path / "inst" / "doc"
    if not doc_dir.is_dir():
        return []
    return sorted(p.name for p in doc_dir.iterdir() if not p.name.startswith("."))


def check_doc_files(pkg=".", out=None) -> CheckResult:
    pkg = load_package(pkg)
    return check_status(
        "/inst/doc does not contain errant files",
        lambda: len(list_doc_files(pkg.path)) == 0,
        "Vignette testing files should be removed with clean_vignettes",
        out=out,
    )
