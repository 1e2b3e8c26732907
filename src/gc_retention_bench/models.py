"""Data models for the benchmark."""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Element:
    """A boxed 32-bit signed integer.

    Each instance is a separate heap object, so two Elements holding the
    same value are equal but never identical. CPython's small-int cache
    does not apply here.

    The hash code is the stored value, which keeps checksums reproducible
    across runs.
    """

    __slots__ = ("value",)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Element value must be an int, got {type(value).__name__}")
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"Element value {value} outside signed 32-bit range")
        self.value = value

    def hash_code(self) -> int:
        return self.value

    def __hash__(self):
        return hash(self.value)

    def __eq__(self, other):
        if isinstance(other, Element):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __repr__(self):
        return f"Element({self.value})"


class IntegerCollection(list):
    """Ordered, growable sequence of Elements.

    Subclassing list makes instances weak-referenceable.
    """

    def values(self) -> List[int]:
        return [element.value for element in self]


@dataclass(frozen=True)
class MemorySnapshot:
    """Memory region usage read at a point in time."""

    label: str
    regions: Dict[str, int]
    taken_at: float = field(default_factory=time.time)

    @property
    def total_bytes(self) -> int:
        return sum(self.regions.values())


@dataclass
class BenchmarkResult:
    """Outcome of one benchmark run."""

    checksums: List[int] = field(default_factory=list)
    before: Optional[MemorySnapshot] = None
    after: Optional[MemorySnapshot] = None
    build_times: List[float] = field(default_factory=list)
    elapsed_time: float = 0.0
    reclaimed: Dict[int, Optional[bool]] = field(default_factory=dict)
