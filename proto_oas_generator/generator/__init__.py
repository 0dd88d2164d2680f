"""
Protobuf Generator Module

This module provides Jinja2-based rendering of protobuf documents with the
naming filters, and the declaration spacing pass applied to the output.
"""

from .spacing import clean_spacing
from .template_engine import ProtoTemplateEngine

__all__ = [
    "ProtoTemplateEngine",
    "clean_spacing",
]
