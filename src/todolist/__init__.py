"""Interactive in-memory task list with a line-oriented console."""

__version__ = "0.1.0"
