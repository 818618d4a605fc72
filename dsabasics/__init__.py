"""Basic number routines, sequence exercises and text patterns, with a command line."""

__version__ = "0.1.0"