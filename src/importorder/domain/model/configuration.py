"""Import order configuration.

Consumes already-resolved options; discovering and merging configuration
files is the host's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from importorder.domain.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class ImportOrderConfig:
    """Rule options.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        sort_members: Check alphabetical order of named bindings.
        case_sensitive: Compare binding names without lower-casing.
    """

    sort_members: bool = True
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ConfigurationError(f.name, f"must be bool, got {type(value).__name__}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, object]) -> ImportOrderConfig:
        """Build config from a mapping of option names.

        Accepts both snake_case and camelCase names (sortMembers,
        caseSensitive). Unknown names are rejected.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, object] = {}
        for key, value in options.items():
            name = _snake_case(key)
            if name not in known:
                raise ConfigurationError(key, "unknown option")
            kwargs[name] = value
        return cls(**kwargs)  # type: ignore[arg-type]


def _snake_case(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)
