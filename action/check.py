#!/usr/bin/env python3
"""Release checks: last-mile sanity checks before submitting an R package.

Runs a fixed sequence of read-only checks over the package's DESCRIPTION,
NEWS files, vignettes and inst/doc, printing OK / WARNING / ERROR for each.
The checks are advisory: a warning or error never stops later checks.

Usage:
    python check.py --path /path/to/package
"""

import argparse
import os
import sys
from pathlib import Path

from checks.dependencies import check_dev_versions
from checks.inst import check_doc_files
from checks.news import check_news_md
from checks.remotes import check_remotes
from checks.version import check_version
from checks.vignettes import check_vignette_titles
from descriptor import load_package
from status import CheckResult, format_github_annotation, summarize


def release_checks(pkg=".", out=None) -> list[CheckResult]:
    """Run every release check against a package path or descriptor.

    Returns the results that were reported; checks that do not apply
    (no vignettes, no NEWS.md) contribute nothing.
    """
    pkg = load_package(pkg)
    print(f"Running release checks for {pkg.name}", file=out)

    results: list[CheckResult] = []
    results.append(check_version(pkg, out=out))
    results.append(check_dev_versions(pkg, out=out))
    vignette_result = check_vignette_titles(pkg, out=out)
    if vignette_result is not None:
        results.append(vignette_result)
    results.extend(check_news_md(pkg, out=out))
    results.append(check_remotes(pkg, out=out))
    results.append(check_doc_files(pkg, out=out))
    return results


# --- Main ---

def main():
    parser = argparse.ArgumentParser(description="R package release checks")
    parser.add_argument("--path", default=".", help="Path to R package")
    args = parser.parse_args()

    pkg_path = Path(args.path).resolve()

    # Verify it's an R package
    try:
        pkg = load_package(pkg_path)
    except FileNotFoundError as exc:
        print(f"::error::{exc}")
        sys.exit(1)

    results = release_checks(pkg)
    counts = summarize(results)

    # Output GitHub annotations (if in CI)
    is_ci = os.environ.get("CI") or os.environ.get("GITHUB_ACTIONS")
    if is_ci:
        for r in results:
            if not r.passed:
                print(format_github_annotation(r))

    # Summary
    print(f"\n{'=' * 60}")
    print(f"  {len(results)} checks: {counts['ok']} ok, {counts['warning']} warnings, {counts['error']} errors")
    print(f"{'=' * 60}")

    # Set GitHub outputs
    if is_ci:
        ghout = os.environ.get("GITHUB_OUTPUT", "")
        if ghout:
            with open(ghout, "a") as f:
                f.write(f"checks={len(results)}\n")
                f.write(f"warnings={counts['warning']}\n")
                f.write(f"errors={counts['error']}\n")


if __name__ == "__main__":
    main()
