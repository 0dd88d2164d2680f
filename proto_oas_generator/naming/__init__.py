"""
Naming Module

This module derives RPC method names from endpoints and constant names from
enum labels.
"""

from .endpoint import Endpoint, compile_endpoint_name, operation_id_to_name, path_method_to_name
from .enums import enum_value_name, normalize_enum_name

__all__ = [
    "Endpoint",
    "compile_endpoint_name",
    "enum_value_name",
    "normalize_enum_name",
    "operation_id_to_name",
    "path_method_to_name",
]
