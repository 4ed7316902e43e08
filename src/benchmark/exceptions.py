"""Custom exceptions for the benchmarking system."""


class BenchmarkExecutionError(Exception):
    """Custom exception for benchmark execution failures."""
    pass


class GenerationError(Exception):
    """Exception raised when a text generation call to a backend fails."""
    pass


class InvalidResponseFormatError(GenerationError):
    """Exception raised when a backend response has no completion text."""
    pass
