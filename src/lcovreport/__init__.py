"""lcov-report - summarize lcov tracefiles and publish them as PR comments."""

__version__ = "0.1.0"
