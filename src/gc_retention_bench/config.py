"""Configuration management for the benchmark."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .models import INT32_MAX

# Load environment variables from .env file
load_dotenv()

DEFAULT_NUM_ELEMENTS = 10_000_000
VALID_TAGGERS = ("none", "weakref")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class BenchmarkConfig:
    """Benchmark configuration parameters."""

    num_elements: int = DEFAULT_NUM_ELEMENTS
    trace_allocations: bool = False
    tagger: str = "none"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Load benchmark configuration from environment variables.

        Recognised variables:
        - NUM_ELEMENTS: elements per collection (default 10,000,000)
        - TRACE_ALLOCATIONS: run under tracemalloc (default false)
        - TAGGER: object tagging hook, ``none`` or ``weakref``
        - VERBOSE: enable debug logging
        """
        return cls(
            num_elements=int(os.getenv("NUM_ELEMENTS", str(DEFAULT_NUM_ELEMENTS))),
            trace_allocations=_env_flag("TRACE_ALLOCATIONS"),
            tagger=os.getenv("TAGGER", "none").lower(),
            verbose=_env_flag("VERBOSE"),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.num_elements < 0:
            raise ValueError("num_elements must be non-negative")
        if self.num_elements > INT32_MAX:
            raise ValueError("num_elements must fit in a signed 32-bit integer")
        if self.tagger not in VALID_TAGGERS:
            raise ValueError(
                f"Unknown tagger: {self.tagger}. Valid options: {', '.join(VALID_TAGGERS)}"
            )


def get_benchmark_config() -> BenchmarkConfig:
    """Get benchmark configuration."""
    return BenchmarkConfig.from_env()
