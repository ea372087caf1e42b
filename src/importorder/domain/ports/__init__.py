"""Domain ports (extension points)."""

from importorder.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
