"""Terminal editor for writing, storing and publishing dated history articles."""

__version__ = "0.1.0"
__all__ = ["__version__"]