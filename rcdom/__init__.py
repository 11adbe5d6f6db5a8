"""A simple document tree for HTML and XML tree builders, with a serialization walker and tree printers."""

__version__ = "0.1.0"
__all__ = ["dom", "serialize", "printing"]