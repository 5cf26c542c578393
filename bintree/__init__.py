"""Binary trees of integers: construction, traversal, measurement and rendering."""

__version__ = "0.1.0"
__all__ = ["measures", "render", "traversal", "tree"]