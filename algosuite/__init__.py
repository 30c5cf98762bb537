"""Solutions to classic algorithm problems, grouped by theme into modules."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "dynamic",
    "graphs",
    "grids",
    "strings",
    "subarrays",
    "trees",
]