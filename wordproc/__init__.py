"""Batch processing of word/password lists."""

__version__ = "1.0.0"
