"""Main entry point for the GC Retention Bench application."""

import logging
import sys

from .benchmark import RetentionBenchmark
from .config import get_benchmark_config
from .memory import compare_snapshots
from .models import BenchmarkResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(result: BenchmarkResult):
    """Print summary statistics.

    Args:
        result: Outcome of the benchmark run
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print("\nAllocation:")
    for index, build_time in enumerate(result.build_times):
        print(f"  Collection {index} built in {build_time:.2f} seconds")

    print("\nChecksums:")
    for index, value in enumerate(result.checksums):
        print(f"  Pass {index + 1}: {value}")
    consistent = len(set(result.checksums)) <= 1
    print(f"  Consistent: {'yes' if consistent else 'NO'}")

    if result.reclaimed:
        print("\nReclamation:")
        for object_id, reclaimed in sorted(result.reclaimed.items()):
            status = "unknown" if reclaimed is None else ("yes" if reclaimed else "no")
            print(f"  Collection {object_id} reclaimed: {status}")

    if result.before is not None and result.after is not None:
        print("\nMemory regions (bytes):")
        df = compare_snapshots(result.before, result.after)
        if df.empty:
            print("  No regions reported")
        else:
            print(df.to_string(index=False))

    print("\nTotal Execution:")
    print(f"  Total time: {result.elapsed_time:.2f} seconds")

    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    logger.info("Starting GC Retention Bench")
    logger.info("=" * 80)

    try:
        config = get_benchmark_config()
        setup_logging(config.verbose)

        logger.info(f"Number of elements: {config.num_elements:,}")
        logger.info(f"Trace allocations: {config.trace_allocations}")
        logger.info(f"Tagger: {config.tagger}")

        result = RetentionBenchmark(config).run()
        print_summary(result)

        logger.info("\nExecution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except MemoryError:
        logger.error("\nOut of memory while allocating elements", exc_info=True)
        return 1
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
