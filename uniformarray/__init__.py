"""Index the fields of uniformly typed dataclasses like a fixed-length sequence."""

__version__ = "0.1.0"
__all__ = ["derive", "example"]