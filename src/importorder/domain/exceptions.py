"""Domain exceptions: all public errors of importorder.

All exceptions visible to users are defined in the domain layer.
Application and infrastructure layers raise these, never their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from importorder.domain.model.check_result import CheckResult


class ImportOrderError(Exception):
    """Base for all importorder error exceptions.

    Allows: except ImportOrderError to catch all library errors.
    """


class ParseError(ImportOrderError, SyntaxError):
    """Failed to read or parse a Python source file.

    Inherits SyntaxError for semantic correctness.

    Attributes:
        path: Path (or pseudo-path) of the source that failed.
        reason: Error description.
    """

    def __init__(self, *, path: str, reason: str) -> None:
        """Initialize with source path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidStatementError(ImportOrderError, ValueError):
    """Import node does not carry what the classifier needs.

    The syntax tree producer is expected to hand over well-formed nodes.
    A node without a module identifier or position info is a precondition
    violation, not a rule violation.

    Attributes:
        reason: What is wrong with the node.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        self.reason = reason
        super().__init__(f"invalid import statement: {reason}")


class SpliceError(ImportOrderError, ValueError):
    """Target sequence is not a permutation of the original sequence."""

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        self.reason = reason
        super().__init__(f"cannot splice: {reason}")


class ConfigurationError(ImportOrderError, ValueError):
    """Invalid option name or option value.

    Attributes:
        option: Offending option name.
    """

    def __init__(self, option: str, reason: str) -> None:
        """Initialize with option name and reason."""
        self.option = option
        self.reason = reason
        super().__init__(f"invalid option '{option}': {reason}")


class ImportOrderViolationError(ImportOrderError):
    """Import ordering rules violated.

    Raised by assert_import_order() when violations found.

    Attributes:
        results: Check results that contain violations.
    """

    def __init__(self, results: tuple[CheckResult, ...]) -> None:
        failed = tuple(r for r in results if not r.passed)
        if not failed:
            raise ValueError("ImportOrderViolationError requires at least one violation")

        self.results = failed

        total = sum(r.violation_count for r in failed)
        msg_parts = [f"Found {total} import order violation(s):"]
        for result in failed:
            for violation in result.violations:
                msg_parts.append(str(violation))

        super().__init__("\n".join(msg_parts))
