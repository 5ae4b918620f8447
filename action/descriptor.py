"""Package descriptor loading for release checks.

Reads an R package's DESCRIPTION file and exposes the handful of fields the
release checks need: name, version, dependency declarations and the package
root. Also hosts the small parsers shared across checks (dependency lists,
version strings) and vignette discovery.
"""

import dataclasses
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


# Fields that declare dependencies on other packages
DEPENDENCY_FIELDS = ("Depends", "Imports", "LinkingTo", "Suggests", "Enhances")

VALID_COMPARE_OPS = {">", ">=", "==", "<=", "<"}

VIGNETTE_PATTERNS = (
    "*.Rmd", "*.rmd", "*.Rnw", "*.rnw", "*.Snw", "*.snw",
    "*.Rtex", "*.Stex", "*.Rhtml", "*.Rrst", "*.Rmarkdown", "*.qmd",
)


# --- Data structures ---

@dataclass(frozen=True)
class DependencyEntry:
    name: str
    compare: str | None = None
    version: str | None = None


@dataclass(frozen=True)
class PackageDescriptor:
    path: Path
    fields: Mapping[str, str] = dataclasses.field(hash=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def name(self) -> str:
        return self.field("Package") or "unknown"

    @property
    def version(self) -> str:
        return self.field("Version") or ""

    def field(self, name: str) -> str | None:
        """Look up a DESCRIPTION field by name, ignoring case."""
        lowered = name.lower()
        for key, value in self.fields.items():
            if key.lower() == lowered:
                return value
        return None

    def has_field(self, name: str) -> bool:
        return self.field(name) is not None

    def dependency_fields(self) -> dict[str, str]:
        """Map each declared dependency field to its raw declaration."""
        deps = {}
        for field_name in DEPENDENCY_FIELDS:
            raw = self.field(field_name)
            if raw is not None:
                deps[field_name] = raw
        return deps


# --- DESCRIPTION parser ---

def parse_description(path: Path) -> dict:
    """Parse DESCRIPTION file into a dict of fields."""
    desc_file = path / "DESCRIPTION"
    if not desc_file.exists():
        return {}
    fields = {}
    current_key = None
    current_value = []
    for line in desc_file.read_text(encoding="utf-8", errors="replace").splitlines():
        # Authors@R is a special case: the @ is part of the field name
        m = re.match(r'^([A-Za-z][A-Za-z0-9_.@]+)\s*:', line)
        if m and not line.startswith((" ", "\t")):
            if current_key:
                fields[current_key] = " ".join(current_value).strip()
            current_key = m.group(1)
            current_value = [line[m.end():].strip()]
        elif current_key and line.startswith((" ", "\t")):
            current_value.append(line.strip())
        elif line.strip() == "":
            if current_key:
                fields[current_key] = " ".join(current_value).strip()
                current_key = None
                current_value = []
    if current_key:
        fields[current_key] = " ".join(current_value).strip()
    return fields


def load_package(pkg=".") -> PackageDescriptor:
    """Resolve a package path (or an already loaded descriptor)."""
    if isinstance(pkg, PackageDescriptor):
        return pkg
    path = Path(pkg).resolve()
    if not (path / "DESCRIPTION").exists():
        raise FileNotFoundError(f"No DESCRIPTION file found at {path}. Is this an R package?")
    return PackageDescriptor(path=path, fields=parse_description(path))


# --- Field parsers ---

_CONSTRAINT_RE = re.compile(r"^\s*(<=|>=|==|<|>|\S*?[^\d\s.-]+)?\s*(.*?)\s*$")


def _split_constraint(text: str) -> tuple[str | None, str | None]:
    """Split "(>=1.0.0)" contents into operator and version; whitespace is optional."""
    m = _CONSTRAINT_RE.match(text)
    return m.group(1), m.group(2) or None


def parse_deps(text: str | None) -> list[DependencyEntry]:
    """Parse a dependency declaration like "dplyr (>= 1.0.0), rlang".

    The R pseudo-dependency is dropped. Raises ValueError on a comparison
    operator R would not accept.
    """
    if text is None or not text.strip():
        return []
    entries = []
    invalid = []
    for piece in re.split(r'\s*,\s*', text.strip()):
        if not piece:
            continue
        name = re.sub(r'\s*\(.*?\)', '', piece).strip()
        compare = version = None
        m = re.search(r"\((.*?)\)", piece)
        if m:
            compare, version = _split_constraint(m.group(1))
            if compare is not None and compare not in VALID_COMPARE_OPS:
                invalid.append(compare)
        if name != "R":
            entries.append(DependencyEntry(name=name, compare=compare, version=version))
    if invalid:
        raise ValueError(f"Invalid comparison operator in dependency: {', '.join(invalid)}")
    return entries


def parse_version(text: str) -> list[int]:
    """Split an R version string ("1.2.3", "1.2-3") into integer components."""
    stripped = text.strip() if text else ""
    if not re.fullmatch(r'\d+(?:[.-]\d+)*', stripped):
        raise ValueError(f"invalid version specification '{text}'")
    return [int(part) for part in re.split(r'[.-]', stripped)]


# --- File scanners ---

def find_vignette_files(path: Path) -> list[Path]:
    """Find vignette source files in vignettes/, or inst/doc/ for older packages."""
    vig_dir = path / "vignettes"
    if not vig_dir.is_dir():
        vig_dir = path / "inst" / "doc"
    if not vig_dir.is_dir():
        return []
    files = set()
    for pattern in VIGNETTE_PATTERNS:
        files.update(f for f in vig_dir.glob(pattern) if f.is_file())
    return sorted(files)
