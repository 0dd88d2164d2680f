"""
Blank line normalization for generated protobuf documents.

Top-level declarations are separated by exactly one blank line no matter how
the templates that produced them laid out their newlines.
"""

import re
from typing import Final, TypeVar

_Document = TypeVar("_Document", str, bytes)

# (terminator, keyword) pairs separated by one blank line
_SPACING_RULES: Final = (
    ("}", "message"),
    ("}", "enum"),
    (";", "message"),
    ("}", "service"),
)

_STR_RULES: Final = tuple(
    (re.compile(re.escape(terminator) + r"\n*" + keyword + " "), f"{terminator}\n\n{keyword} ")
    for terminator, keyword in _SPACING_RULES
)
_BYTES_RULES: Final = tuple(
    (re.compile(pattern.pattern.encode("ascii")), replacement.encode("ascii"))
    for pattern, replacement in _STR_RULES
)


def clean_spacing(document: _Document) -> _Document:
    """Put exactly one blank line before each top-level declaration.

    Args:
        document: The rendered document, as text or bytes.

    Returns:
        The document with declaration spacing normalized, in the input type.

    Example:
        >>> clean_spacing("message A {\\n}\\nmessage B {\\n}\\n")
        'message A {\\n}\\n\\nmessage B {\\n}\\n'
    """
    rules = _BYTES_RULES if isinstance(document, bytes) else _STR_RULES
    for pattern, replacement in rules:
        document = pattern.sub(replacement, document)
    return document
