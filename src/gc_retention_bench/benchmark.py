"""Benchmark sequence: allocate, collect, checksum, drop, reallocate."""

import logging
import time
import tracemalloc
from typing import Optional, TextIO

from .collection import build, checksum
from .config import BenchmarkConfig
from .memory import MemoryReporter, collect
from .models import BenchmarkResult
from .protocols import LoggerProtocol, ObjectTagger
from .tagging import NoOpTagger, WeakRefTagger

REPEATED_PASSES = 3


def create_tagger(name: str) -> ObjectTagger:
    """Create the tagging hook named in the configuration."""
    if name == "weakref":
        return WeakRefTagger()
    if name == "none":
        return NoOpTagger()
    raise ValueError(f"Unknown tagger: {name}. Valid options: none, weakref")


class RetentionBenchmark:
    """
    Runs the allocation / collection sequence once.

    The first collection is checksummed after each of three collector
    passes, then its only reference is dropped before a second collection
    of the same size is built.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        reporter: Optional[MemoryReporter] = None,
        tagger: Optional[ObjectTagger] = None,
        stream: Optional[TextIO] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize the benchmark.

        Args:
            config: Benchmark configuration
            reporter: Memory reporter, defaults to one on the runtime source
            tagger: Object tagging hook, defaults to the configured one
            stream: Output stream for reports and checksums
            logger: Logger instance
        """
        self.config = config
        self._stream = stream
        self._reporter = reporter or MemoryReporter(stream=stream)
        self._tagger = tagger or create_tagger(config.tagger)
        self._logger = logger or logging.getLogger(__name__)

    def _build(self, result: BenchmarkResult, object_id: int):
        start_time = time.time()
        collection = build(self.config.num_elements)
        result.build_times.append(time.time() - start_time)
        self._tagger.mark(collection, object_id, 0)
        return collection

    def _checksum(self, result: BenchmarkResult, collection) -> None:
        result.checksums.append(
            checksum(collection, self.config.num_elements, stream=self._stream)
        )

    def _reclaimed(self, object_id: int) -> Optional[bool]:
        if isinstance(self._tagger, WeakRefTagger):
            return not self._tagger.is_alive(object_id)
        return None

    def run(self) -> BenchmarkResult:
        """
        Execute the benchmark sequence.

        Returns:
            BenchmarkResult with checksums, snapshots and timings
        """
        num_elements = self.config.num_elements
        self._logger.info(f"Running retention benchmark with {num_elements:,} elements")

        started_tracing = False
        if self.config.trace_allocations and not tracemalloc.is_tracing():
            tracemalloc.start()
            started_tracing = True

        result = BenchmarkResult()
        start_time = time.time()

        try:
            self._reporter.report("Memory Before")
            result.before = self._reporter.last

            collection = self._build(result, object_id=0)
            for _ in range(REPEATED_PASSES):
                collect()
                self._checksum(result, collection)

            # Release the only handle; nothing else may reference it now.
            del collection
            collect()
            result.reclaimed[0] = self._reclaimed(0)
            if result.reclaimed[0] is False:
                self._logger.warning("First collection still reachable after GC pass")

            second = self._build(result, object_id=1)
            collect()
            self._checksum(result, second)

            self._reporter.report("Memory After")
            result.after = self._reporter.last
        finally:
            if started_tracing:
                tracemalloc.stop()

        result.elapsed_time = time.time() - start_time
        self._logger.info(f"Benchmark completed in {result.elapsed_time:.2f} seconds")
        return result
