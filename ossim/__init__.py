"""Teaching simulator of Round Robin scheduling with contiguous and paged memory."""

__version__ = "0.1.0"
__all__ = ["__version__"]