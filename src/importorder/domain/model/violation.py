"""Rule violation entity and its rewrite descriptor."""

from dataclasses import dataclass

from importorder.domain.model.enums import ViolationKind
from importorder.domain.model.location import Location
from importorder.domain.model.span import Span


@dataclass(frozen=True, slots=True)
class Rewrite:
    """Textual edit that resolves a violation.

    Value object: the host applies it, nothing here mutates source.

    Attributes:
        span: Range of the original text to replace
        replacement: New text for that range
    """

    span: Span
    replacement: str

    def apply(self, source: str) -> str:
        """Return source with span replaced by replacement."""
        if self.span.end > len(source):
            raise ValueError(f"rewrite span end {self.span.end} exceeds source length {len(source)}")
        return source[: self.span.start] + self.replacement + source[self.span.end :]


@dataclass(frozen=True, slots=True)
class Violation:
    """Import ordering violation.

    Attributes:
        kind: Broken rule
        message: Human-readable message with offending names
        location: Where to report (offending statement or binding)
        span: Character span of the offending node
        rewrite: Automatic fix, None when not auto-fixable
    """

    kind: ViolationKind
    message: str
    location: Location
    span: Span
    rewrite: Rewrite | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, ViolationKind):
            raise TypeError(f"kind must be ViolationKind, got {type(self.kind).__name__}")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.kind is ViolationKind.DUPLICATE_MODULE and self.rewrite is not None:
            raise ValueError("duplicate module violations are never auto-fixed")

    @property
    def fixable(self) -> bool:
        """Whether an automatic rewrite is available."""
        return self.rewrite is not None

    def __str__(self) -> str:
        """Format violation for display."""
        return f"{self.location}: {self.message} [{self.kind.value}]"
