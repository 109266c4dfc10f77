"""
Data Utilities
==============

• Title casing with configurable word exceptions
• CSV upload loading
• String overlap
• URL from path / URL exists
"""

from data_utilities.csv_loader import load_csv_to_list, load_uploaded_csv
from data_utilities.errors import ConfigError, DataUtilitiesError
from data_utilities.overlap import overlap
from data_utilities.title_formatter import (
    DEFAULT_EXCEPTIONS,
    WordExceptions,
    load_word_exceptions,
    title_case,
)
from data_utilities.url_tools import url_exists, url_from_path

__version__ = "1.0.0"


class DataUtilities:
    """
    Static access to every helper, for callers that prefer one namespace.
    """

    title_case = staticmethod(title_case)
    load_csv_to_list = staticmethod(load_csv_to_list)
    load_uploaded_csv = staticmethod(load_uploaded_csv)
    overlap = staticmethod(overlap)
    url_from_path = staticmethod(url_from_path)
    url_exists = staticmethod(url_exists)


__all__ = [
    "ConfigError",
    "DEFAULT_EXCEPTIONS",
    "DataUtilities",
    "DataUtilitiesError",
    "WordExceptions",
    "load_csv_to_list",
    "load_uploaded_csv",
    "load_word_exceptions",
    "overlap",
    "title_case",
    "url_exists",
    "url_from_path",
]
