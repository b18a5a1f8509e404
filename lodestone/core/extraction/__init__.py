"""Extraction protocol exports."""

from lodestone.core.extraction.extractor import as_int, as_list, as_optional_int, extract, read_raw, select

__all__ = ['as_int', 'as_list', 'as_optional_int', 'extract', 'read_raw', 'select']
