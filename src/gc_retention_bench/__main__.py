"""Allow running the benchmark with ``python -m gc_retention_bench``."""

from .main import run

run()
