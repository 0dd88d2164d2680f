"""
Jinja2 filters for protobuf document generation.

This module exposes the naming functions to templates so that generated
documents name their packages, services, RPCs and enum values the same way
the rest of the toolchain does.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from proto_oas_generator.naming.endpoint import (
    Endpoint,
    compile_endpoint_name,
    operation_id_to_name,
    path_method_to_name,
)
from proto_oas_generator.naming.enums import enum_value_name, normalize_enum_name
from proto_oas_generator.utils.string_case import (
    all_caps,
    camel_case,
    clean_and_title,
    clean_characters,
    looks_like_integer,
    package_name,
    service_name,
    snake_case,
)

_COMMENT_PREFIX = "// "


def proto_comment(text: str, indent: int = 0) -> str:
    """Convert text to protobuf line comments.

    Args:
        text: The text to convert to comments.
        indent: Number of spaces for base indentation.

    Returns:
        Formatted comment lines.

    Example:
        >>> proto_comment("Pets in the store")
        '// Pets in the store'
        >>> proto_comment("a\\nb", indent=2)
        '  // a\\n  // b'
    """
    if not text:
        return ""

    indent_str = " " * indent
    lines = text.strip().split("\n")
    return "\n".join(f"{indent_str}{_COMMENT_PREFIX}{line.strip()}".rstrip() for line in lines)


def endpoint_name(endpoint: Any, verb: str | None = None, operation_id: str = "") -> str:
    """Name an endpoint given an Endpoint, a mapping or a path.

    Templates may pass an ``Endpoint``, a JSON object with ``path``, ``verb``
    and ``operation_id`` keys, or spell the pieces out:
    ``{{ "/pets" | endpoint_name("get") }}``.
    """
    if verb is not None:
        return path_method_to_name(str(endpoint), verb, operation_id)
    if isinstance(endpoint, Mapping):
        endpoint = Endpoint(
            path=endpoint.get("path") or "",
            verb=endpoint.get("verb") or "",
            operation_id=endpoint.get("operation_id") or endpoint.get("operationId") or "",
        )
    return compile_endpoint_name(endpoint)


# Register filters that will be available in Jinja templates
FILTERS: dict[str, Callable[..., Any]] = {
    "all_caps": all_caps,
    "snake_case": snake_case,
    "camel_case": camel_case,
    "clean_characters": clean_characters,
    "clean_and_title": clean_and_title,
    "package_name": package_name,
    "service_name": service_name,
    "operation_name": operation_id_to_name,
    "endpoint_name": endpoint_name,
    "enum_name": normalize_enum_name,
    "enum_value_name": enum_value_name,
    "looks_like_integer": looks_like_integer,
    "proto_comment": proto_comment,
}
