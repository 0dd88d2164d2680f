"""
Protobuf Naming for OpenAPI

Derives stable protobuf identifiers (package, service, RPC and enum value
names) from the free-form text of an OpenAPI description.
"""

from .generator import ProtoTemplateEngine, clean_spacing
from .naming import (
    Endpoint,
    compile_endpoint_name,
    enum_value_name,
    normalize_enum_name,
    operation_id_to_name,
    path_method_to_name,
)
from .utils import (
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
)

__version__ = "1.0.0"

__all__ = [
    "Endpoint",
    "ProtoTemplateEngine",
    "all_caps",
    "camel_case",
    "clean_and_title",
    "clean_characters",
    "clean_spacing",
    "compile_endpoint_name",
    "concat_spaces",
    "enum_value_name",
    "is_alpha_num",
    "is_space",
    "looks_like_integer",
    "normalize_enum_name",
    "operation_id_to_name",
    "package_name",
    "path_method_to_name",
    "service_name",
    "snake_case",
]
