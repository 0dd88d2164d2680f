"""
Utilities Module for Protobuf Name Generation

This module provides string case conversions, identifier sanitizing and the
file helpers used by the command line interface.
"""

from .file_utils import ensure_directory, load_json_context, read_document, write_document
from .string_case import (
    all_caps,
    camel_case,
    clean_and_title,
    clean_characters,
    concat_spaces,
    is_alpha_num,
    is_space,
    looks_like_integer,
    package_name,
    service_name,
    snake_case,
    titlecase,
)

__all__ = [
    "all_caps",
    "camel_case",
    "clean_and_title",
    "clean_characters",
    "concat_spaces",
    "ensure_directory",
    "is_alpha_num",
    "is_space",
    "load_json_context",
    "looks_like_integer",
    "package_name",
    "read_document",
    "service_name",
    "snake_case",
    "titlecase",
    "write_document",
]
