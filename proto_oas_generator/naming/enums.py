"""Enum constant naming for OpenAPI enum labels."""

from typing import Final

from proto_oas_generator.utils.string_case import all_caps, is_alpha_num, is_space

_AMPERSAND: Final = "&"
_AMPERSAND_WORD: Final = " AND "
_UNKNOWN_VALUE: Final = "UNKNOWN"


def _collapse_word_breaks(label: str) -> str:
    # whitespace and underscore runs become one underscore, punctuation is dropped
    result: list[str] = []
    was_space = False
    for char in label:
        if is_alpha_num(char):
            was_space = False
            result.append(char)
        elif is_space(char) or char == "_":
            if not was_space:
                result.append("_")
            was_space = True
    return "".join(result)


def _join_alnum_runs(label: str) -> str:
    result: list[str] = []
    was_non_alnum = False
    for char in label:
        if not is_alpha_num(char):
            was_non_alnum = True
            continue
        if was_non_alnum:
            result.append("_")
        was_non_alnum = False
        result.append(char)
    return "".join(result)


def normalize_enum_name(label: str) -> str:
    """Normalize an enum label into an identifier.

    An ampersand reads as ``AND``, whitespace and underscore runs collapse into
    a single underscore and any other punctuation is removed. The case of the
    label is preserved; combine with ``all_caps`` for a constant name.

    Args:
        label: The raw enum value text.

    Returns:
        The normalized enum name.

    Examples:
        >>> normalize_enum_name("Cats & Dogs")
        'Cats_AND_Dogs'
        >>> normalize_enum_name("N/A")
        'NA'
    """
    label = label.replace(_AMPERSAND, _AMPERSAND_WORD)
    return _join_alnum_runs(_collapse_word_breaks(label))


def enum_value_name(enum_name: str, label: str) -> str:
    """Build the protobuf constant for a label of the given enum.

    Values are prefixed with the enum name since protobuf enum values share
    the scope of their parent, which also keeps numeric labels legal.

    Examples:
        >>> enum_value_name("PetStatus", "in stock")
        'PETSTATUS_IN_STOCK'
        >>> enum_value_name("code", "200")
        'CODE_200'
    """
    value = all_caps(normalize_enum_name(label)) or _UNKNOWN_VALUE
    return f"{all_caps(enum_name)}_{value}"
