"""Duration formatting, outlier detection, parameter scans, session options and result exports for benchmarking commands."""

__version__ = "0.1.0"