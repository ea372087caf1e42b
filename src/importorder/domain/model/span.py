"""Character span value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open range [start, end) of character offsets in source text.

    Attributes:
        start: Offset of the first character (>= 0)
        end: Offset one past the last character (>= start)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    def __len__(self) -> int:
        return self.end - self.start

    def text(self, source: str) -> str:
        """Slice this span out of source."""
        if self.end > len(source):
            raise ValueError(f"span end {self.end} exceeds source length {len(source)}")
        return source[self.start : self.end]

    def cover(self, other: "Span") -> "Span":
        """Smallest span containing both spans."""
        return Span(min(self.start, other.start), max(self.end, other.end))
