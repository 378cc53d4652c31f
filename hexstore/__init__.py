"""Dense, list-backed storage for hexagon and rombus shaped hex-grid maps."""

__version__ = "0.1.0"
__all__ = ["hexagonal", "rombus"]