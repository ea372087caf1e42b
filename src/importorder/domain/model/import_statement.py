"""Import statement and imported binding entities."""

from dataclasses import dataclass

from importorder.domain.model.location import Location
from importorder.domain.model.span import Span

RELATIVE_MARKER = "."


@dataclass(frozen=True, slots=True)
class ImportedBinding:
    """One named identifier introduced by an import statement.

    Represents `b` and `c` in:
    - from a import b, c
    - from a import b as c   (local_name="c")

    Attributes:
        local_name: Name bound in the importing module
        span: Span of the whole alias (`b as c`) in source
        location: Source location of the alias
    """

    local_name: str
    span: Span
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.local_name:
            raise ValueError("local_name must not be empty")

    def sort_key(self, case_sensitive: bool = False) -> str:
        """Key used for alphabetical comparison of bindings."""
        if case_sensitive:
            return self.local_name
        return self.local_name.lower()


@dataclass(frozen=True, slots=True)
class ImportStatement:
    """Read-only view of one module-level import statement.

    Examples (module_identifier / is_empty):
    - import os.path          ("os.path", True)
    - from os import path     ("os", False)
    - from . import sibling   (".", False)
    - from ..pkg import name  ("..pkg", False)
    - from os import *        ("os", True)

    Attributes:
        module_identifier: Literal module specifier as written
        is_empty: True if the statement binds no named members
        bindings: Named bindings in source order
        span: Span of the whole statement in source
        location: Source location of the statement
    """

    module_identifier: str
    is_empty: bool
    bindings: tuple[ImportedBinding, ...]
    span: Span
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module_identifier:
            raise ValueError("module_identifier must not be empty")
        if not isinstance(self.is_empty, bool):
            raise TypeError("is_empty must be bool")
        if self.is_empty and self.bindings:
            raise ValueError("empty import must not have bindings")
        for binding in self.bindings:
            if not (self.span.start <= binding.span.start and binding.span.end <= self.span.end):
                raise ValueError(f"binding '{binding.local_name}' lies outside its statement")

    @property
    def is_absolute(self) -> bool:
        """True unless the module identifier starts with a relative marker."""
        return not self.module_identifier.startswith(RELATIVE_MARKER)

    @property
    def sort_key(self) -> tuple[bool, bool, str]:
        """Composite key of the canonical statement order.

        Empty imports first, then absolute before relative, then by name.
        """
        return (not self.is_empty, not self.is_absolute, self.module_identifier)
