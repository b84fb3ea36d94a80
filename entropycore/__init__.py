"""Core utilities: string hashing, strong aliases, type names and identifiers, runtime type checks and levelled logging."""

__version__ = "0.1.0"
__all__ = ["hashing", "strong_alias", "type_traits", "typeid", "log"]