"""Search and planning algorithms for small grid maze games."""

__version__ = "0.1.0"