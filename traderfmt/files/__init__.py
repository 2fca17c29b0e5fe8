"""Filesystem access for trader config sources."""

from traderfmt.files.load import load_source

__all__ = ["load_source"]
