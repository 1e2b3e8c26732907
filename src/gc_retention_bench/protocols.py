"""Protocol definitions for dependency inversion."""

from typing import Any, Dict, Protocol


class MemoryRegionSource(Protocol):
    """Protocol for runtime memory introspection."""

    def read_regions(self) -> Dict[str, int]:
        """Return region name -> bytes used, in reporting order."""
        ...


class ObjectTagger(Protocol):
    """Protocol for tagging objects for an external observer."""

    def mark(self, obj: Any, object_id: int, partition: int) -> None:
        """Associate obj with an id and partition."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
