"""
RPC method naming for OpenAPI endpoints.

An endpoint is named after its explicit operation identifier when it has one,
otherwise after its HTTP verb and the words of its path.
"""

from dataclasses import dataclass
from typing import Final

from proto_oas_generator.utils.string_case import camel_case, clean_and_title, is_alpha_num, is_space

_JSON_PATH_SUFFIX: Final = ".json"
_JSON_OPERATION_SUFFIX: Final = "_json"
_QUERY_SEPARATOR: Final = "?"

# Path characters that split words
_PATH_WORD_SEPARATORS: Final = frozenset({"_", "-", ".", "/"})

# Placeholder delimiters removed from paths, their inner text is kept
# TODO: whitelist identifier characters instead of removing delimiters
_PATH_PLACEHOLDER_DELIMITERS: Final = frozenset({"{", "}", "[", "]", "(", ")"})


@dataclass(frozen=True)
class Endpoint:
    """An OpenAPI operation as seen by the naming layer."""

    path: str
    verb: str
    operation_id: str = ""


def operation_id_to_name(operation_id: str) -> str:
    """Convert an explicit operation identifier into an RPC method name.

    Every letter is lower-cased and each run of separators collapses into a
    single word boundary before the name is camel-cased. A trailing ``_json``
    word is dropped.

    Args:
        operation_id: The operationId of the endpoint.

    Returns:
        Camel case method name.

    Examples:
        >>> operation_id_to_name("List Pets")
        'ListPets'
        >>> operation_id_to_name("find-pets.json")
        'FindPets'
    """
    words: list[str] = []
    was_non_alnum = False
    for char in operation_id:
        if not is_alpha_num(char):
            was_non_alnum = True
            continue
        if was_non_alnum:
            words.append("_")
        was_non_alnum = False
        words.append(char.lower())

    name = "".join(words)
    if name.endswith(_JSON_OPERATION_SUFFIX):
        name = name[: -len(_JSON_OPERATION_SUFFIX)]
    return camel_case(name)


def _strip_path(path: str) -> str:
    if path.endswith(_JSON_PATH_SUFFIX):
        path = path[: -len(_JSON_PATH_SUFFIX)]

    # Query strings are illegal in OpenAPI paths, but some tooling emits them
    query_index = path.rfind(_QUERY_SEPARATOR)
    if query_index > 0:
        path = path[:query_index]
    return path


def _path_words(path: str) -> list[str]:
    chars: list[str] = []
    for char in _strip_path(path):
        if char in _PATH_PLACEHOLDER_DELIMITERS:
            continue
        chars.append(" " if char in _PATH_WORD_SEPARATORS or is_space(char) else char)
    return [word for word in "".join(chars).split(" ") if word]


def path_method_to_name(path: str, method: str, operation_id: str = "") -> str:
    """Derive an RPC method name from an endpoint path and HTTP method.

    Args:
        path: The endpoint path, e.g. ``/pets/{petId}``.
        method: The HTTP method, e.g. ``get``.
        operation_id: Optional operationId, takes precedence when non-empty.

    Returns:
        The RPC method name.

    Examples:
        >>> path_method_to_name("/pets/{petId}", "get")
        'GetPetsPetId'
        >>> path_method_to_name("/pets.json", "list")
        'ListPets'
    """
    if operation_id:
        return operation_id_to_name(operation_id)

    name = "".join(clean_and_title(word) for word in _path_words(path))
    return clean_and_title(method) + name


def compile_endpoint_name(endpoint: Endpoint) -> str:
    """Derive the RPC method name of an endpoint."""
    return path_method_to_name(endpoint.path, endpoint.verb, endpoint.operation_id)
