"""procargs - print process arguments and ancestry from /proc."""

__version__ = "0.1.0"
