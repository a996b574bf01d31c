"""In-process job scheduler with delayed jobs, retry strategies, observers and a thread pool."""

__version__ = "0.1.0"