"""Type definitions for keycase-lint."""
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Violation:
    """Single camelCase key found in a template line."""

    line_number: int
    offending_key: str
    suggested_key: str
    context: str

    def to_dict(self) -> dict[str, Any]:
        """Convert violation to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ScanResult:
    """Result of scanning a single file."""

    total_lines_scanned: int = 0
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "total_lines_scanned": self.total_lines_scanned,
            "violations": [v.to_dict() for v in self.violations],
        }
