"""Smarterz: personal progress tracker for Eduverse batches."""

__version__ = "0.1.0"
