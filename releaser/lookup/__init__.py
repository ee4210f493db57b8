"""Lookup tables of known releaser stylizations and initialisms."""

from .table import ReleaserTable, default_table, load_table

__all__ = ["ReleaserTable", "default_table", "load_table"]
