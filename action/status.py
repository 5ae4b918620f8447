"""Status reporting for release checks.

Every check goes through check_status(), which prints the
"Checking <name>..." line, evaluates the check inside an error boundary and
turns the outcome into a CheckResult:

  ok       predicate returned True   -> " OK"
  warning  predicate returned False  -> "WARNING: <message>"
  error    predicate raised          -> "ERROR: <exception text>"

A failing or crashing check never stops the run.
"""

from dataclasses import dataclass


# --- Data structures ---

@dataclass
class CheckResult:
    name: str
    status: str  # "ok", "warning", "error"
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.status == "ok"


STATUS_GH = {"warning": "warning", "error": "error"}


# --- Reporter ---

def _error_text(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def check_status(name, predicate, warning, out=None) -> CheckResult:
    """Run one check and print its status line.

    predicate is a zero-argument callable returning a bool. warning is the
    message shown when it returns False; it may itself be a callable, which is
    only evaluated on failure.
    """
    print(f"Checking {name}...", end="", file=out)
    try:
        if predicate():
            print(" OK", file=out)
            return CheckResult(name=name, status="ok")
        message = warning() if callable(warning) else warning
    except Exception as exc:
        text = _error_text(exc)
        print(file=out)
        print(f"ERROR: {text}", file=out)
        return CheckResult(name=name, status="error", message=text)
    print(file=out)
    print(f"WARNING: {message}", file=out)
    return CheckResult(name=name, status="warning", message=message)


# --- Output formatting ---

def format_github_annotation(result: CheckResult) -> str:
    """Format a non-passing result as a GitHub Actions annotation."""
    level = STATUS_GH[result.status]
    return f"::{level} ::{result.name}: {result.message}"


def summarize(results: list[CheckResult]) -> dict[str, int]:
    """Count results by status."""
    counts = {"ok": 0, "warning": 0, "error": 0}
    for r in results:
        counts[r.status] += 1
    return counts
