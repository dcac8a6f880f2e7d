"""Classic abstract data types and a command interpreter to exercise them."""

__version__ = "0.1.0"