"""Object tagging hooks."""

import logging
import weakref
from typing import Any, Dict, List, Optional

from .protocols import LoggerProtocol


class NoOpTagger:
    """Tagger that ignores every mark."""

    def mark(self, obj: Any, object_id: int, partition: int) -> None:
        pass


class WeakRefTagger:
    """
    Tracks tagged objects through weak references.

    Single Responsibility: Tell whether a tagged object is still alive.
    Holds no strong references, so tagging never extends a lifetime.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize weakref tagger.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self._refs: Dict[int, weakref.ref] = {}
        self._partitions: Dict[int, int] = {}

    def mark(self, obj: Any, object_id: int, partition: int) -> None:
        """
        Tag an object.

        Args:
            obj: Weak-referenceable object
            object_id: Identifier reported back by is_alive
            partition: Partition hint, recorded only

        Raises:
            TypeError: If obj does not support weak references
        """
        self._refs[object_id] = weakref.ref(obj)
        self._partitions[object_id] = partition
        self._logger.debug(
            f"Tagged {type(obj).__name__} as id={object_id} partition={partition}"
        )

    def is_alive(self, object_id: int) -> bool:
        """Return True while the object tagged with object_id is reachable."""
        ref = self._refs.get(object_id)
        if ref is None:
            raise KeyError(f"No object tagged with id {object_id}")
        return ref() is not None

    def partition_of(self, object_id: int) -> int:
        return self._partitions[object_id]

    def tracked_ids(self) -> List[int]:
        return sorted(self._refs)
