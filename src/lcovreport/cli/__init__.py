"""lcov-report command line."""
