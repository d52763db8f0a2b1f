"""
ListOps - list operations for template expressions

Set algebra with explicit duplicate handling, sorting by named methods,
rotation, splicing and element access over plain Python lists.
"""

__version__ = "1.3.0"

from listops.plugin import OPERATIONS, ListOps

__all__ = ["__version__", "ListOps", "OPERATIONS"]
