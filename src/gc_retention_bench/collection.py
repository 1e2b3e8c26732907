"""Build collections of boxed integers and checksum them."""

import logging
import sys
from typing import Optional, TextIO

from .models import Element, IntegerCollection

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 1_000_000


def _to_int64(value: int) -> int:
    """Wrap an integer to signed 64-bit two's complement."""
    value &= 0xFFFFFFFFFFFFFFFF
    if value >= 0x8000000000000000:
        value -= 0x10000000000000000
    return value


def build(n: int) -> IntegerCollection:
    """Create a collection holding fresh Elements with values 0..n-1.

    Args:
        n: Number of elements to allocate

    Returns:
        IntegerCollection in ascending value order

    Raises:
        ValueError: If n is negative or not an int
        MemoryError: If the interpreter cannot allocate n elements
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Element count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Element count must be non-negative, got {n}")

    logger.info(f"Allocating {n:,} boxed integers...")

    collection = IntegerCollection()
    for i in range(n):
        collection.append(Element(i))

        if (i + 1) % PROGRESS_INTERVAL == 0:
            logger.debug(f"Allocated {i + 1:,} elements...")

    logger.info(f"Successfully allocated {len(collection):,} elements")
    return collection


def checksum(collection: IntegerCollection, n: int, stream: Optional[TextIO] = None) -> int:
    """Sum the hash codes of the first n elements as a signed 64-bit value.

    Prints ``Hashcode Element = <sum>`` and returns the sum.

    Args:
        collection: Collection to read
        n: Number of leading elements to include
        stream: Output stream, defaults to sys.stdout

    Raises:
        ValueError: If n is negative
        IndexError: If n exceeds the collection size
    """
    if n < 0:
        raise ValueError(f"Element count must be non-negative, got {n}")
    if n > len(collection):
        raise IndexError(
            f"Element count {n:,} exceeds collection size {len(collection):,}"
        )

    total = 0
    for i in range(n):
        total += collection[i].hash_code()
    total = _to_int64(total)

    print(f"Hashcode Element = {total}", file=stream or sys.stdout)
    return total
