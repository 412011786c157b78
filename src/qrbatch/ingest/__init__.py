"""Tabular record ingestion."""

from .tabular import SUPPORTED_SUFFIXES, read_table, rows_to_records

__all__ = ["SUPPORTED_SUFFIXES", "read_table", "rows_to_records"]
