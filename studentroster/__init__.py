"""Load, search, filter, sort and save a class roster of students and their scores."""

__version__ = "0.1.0"
__all__ = ["__version__"]