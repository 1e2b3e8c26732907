"""Memory region reporting and garbage collection hints."""

import gc
import logging
import os
import sys
import time
import tracemalloc
from typing import Dict, List, Optional, TextIO

import pandas as pd
import psutil
import pyarrow as pa

from .models import MemorySnapshot
from .protocols import LoggerProtocol, MemoryRegionSource

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 41


class RuntimeMemorySource:
    """
    Reads memory regions tracked by the interpreter and the process.

    Regions, in reporting order:
    - process rss / process vms (psutil)
    - tracemalloc current / tracemalloc peak, only while tracing
    - arrow default pool (pyarrow's default memory pool)
    """

    def __init__(self, process: Optional[psutil.Process] = None):
        self._process = process or psutil.Process(os.getpid())

    def read_regions(self) -> Dict[str, int]:
        regions: Dict[str, int] = {}

        mem_info = self._process.memory_info()
        regions["process rss"] = mem_info.rss
        regions["process vms"] = mem_info.vms

        if tracemalloc.is_tracing():
            current_mem, peak_mem = tracemalloc.get_traced_memory()
            regions["tracemalloc current"] = current_mem
            regions["tracemalloc peak"] = peak_mem

        regions["arrow default pool"] = pa.default_memory_pool().bytes_allocated()
        return regions


class MemoryReporter:
    """
    Prints memory region usage under a label.

    Single Responsibility: Read regions from a source and report them.
    Every printed report is also kept in ``snapshots``.
    """

    def __init__(
        self,
        source: Optional[MemoryRegionSource] = None,
        stream: Optional[TextIO] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize memory reporter.

        Args:
            source: Memory region source, defaults to RuntimeMemorySource
            stream: Output stream, defaults to sys.stdout at print time
            logger: Logger instance
        """
        self._source = source or RuntimeMemorySource()
        self._stream = stream
        self._logger = logger or logging.getLogger(__name__)
        self.snapshots: List[MemorySnapshot] = []

    def snapshot(self, label: str) -> MemorySnapshot:
        """Read the current regions without printing."""
        regions = dict(self._source.read_regions())
        if not regions:
            self._logger.warning(f"No memory regions available for '{label}'")
        return MemorySnapshot(label=label, regions=regions)

    def report(self, label: str) -> None:
        """
        Print the label followed by each region's name and bytes used.

        Args:
            label: Human-readable label for this report
        """
        snapshot = self.snapshot(label)
        out = self._stream or sys.stdout

        print(SEPARATOR, file=out)
        print(label + "\n", file=out)
        print(SEPARATOR, file=out)
        for name, used in snapshot.regions.items():
            print(name, file=out)
            print(used, file=out)

        self.snapshots.append(snapshot)

    @property
    def last(self) -> Optional[MemorySnapshot]:
        return self.snapshots[-1] if self.snapshots else None


def collect(generation: int = 2) -> None:
    """
    Ask the interpreter for a garbage collection pass.

    This is a best-effort hint. CPython frees most objects by reference
    counting as soon as the last reference goes away; gc.collect only
    reclaims unreachable cycles, and other interpreters may defer the work.
    """
    start_time = time.time()
    unreachable = gc.collect(generation)
    elapsed_time = time.time() - start_time
    logger.info(
        f"GC pass (generation {generation}) found {unreachable:,} unreachable objects "
        f"in {elapsed_time:.4f} seconds"
    )


def compare_snapshots(before: MemorySnapshot, after: MemorySnapshot) -> pd.DataFrame:
    """
    Build a per-region comparison of two snapshots.

    Regions missing from one side count as 0 bytes there.

    Args:
        before: Earlier snapshot
        after: Later snapshot

    Returns:
        DataFrame with columns region, before, after, delta
    """
    names = list(before.regions)
    names += [name for name in after.regions if name not in before.regions]

    df = pd.DataFrame(
        {
            "region": names,
            "before": [before.regions.get(name, 0) for name in names],
            "after": [after.regions.get(name, 0) for name in names],
        }
    )
    df["delta"] = df["after"] - df["before"]
    return df
