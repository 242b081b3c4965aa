"""Prefix-notation expression parsing, evaluation, Graphviz tree dumps and a small logger."""

__version__ = "0.1.0"
__all__ = ["colour", "errors", "file_data", "logger", "tree", "cli"]