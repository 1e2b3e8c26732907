"""GC Retention Bench - Allocate boxed integers and watch the collector reclaim them."""

__version__ = "0.1.0"

from .benchmark import RetentionBenchmark
from .collection import build, checksum
from .memory import MemoryReporter, RuntimeMemorySource, collect, compare_snapshots
from .models import BenchmarkResult, Element, IntegerCollection, MemorySnapshot
from .tagging import NoOpTagger, WeakRefTagger

__all__ = [
    "BenchmarkResult",
    "Element",
    "IntegerCollection",
    "MemoryReporter",
    "MemorySnapshot",
    "NoOpTagger",
    "RetentionBenchmark",
    "RuntimeMemorySource",
    "WeakRefTagger",
    "build",
    "checksum",
    "collect",
    "compare_snapshots",
]
