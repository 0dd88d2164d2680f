"""
String case conversion utilities for protobuf name generation.

This module provides the character classifier, the primitive casers and the
composite name builders used to turn free-form OpenAPI text into protobuf
identifiers.

Only the ASCII letters and digits count as alphanumeric. Every other code
point, whatever its script, is treated as a separator, so names derived from
non-ASCII input are stable across locales.
"""

from typing import Final

_UNDERSCORE: Final = "_"
_SERVICE_SUFFIX: Final = "Service"

# The one lower-case mapping that expands to several code points
_SIMPLE_LOWER: Final = {"\u0130": "i"}


def is_alpha_num(char: str) -> bool:
    """Check if a single character is an ASCII letter or digit.

    Args:
        char: The character to classify.

    Returns:
        True if the character is in A-Z, a-z or 0-9.

    Examples:
        >>> is_alpha_num("a")
        True
        >>> is_alpha_num("é")
        False
    """
    return "A" <= char <= "Z" or "a" <= char <= "z" or "0" <= char <= "9"


def _upper(char: str) -> str:
    # str.upper() may expand a single code point ("ß" -> "SS")
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _lower(char: str) -> str:
    lower = char.lower()
    return lower if len(lower) == 1 else _SIMPLE_LOWER.get(char, char)


def is_space(char: str) -> bool:
    """Check if a single character is Unicode white space.

    ``str.isspace`` also accepts the ASCII information separators
    U+001C to U+001F, which are not white space and are excluded here.

    Examples:
        >>> is_space("\\u00a0")
        True
        >>> is_space("\\x1f")
        False
    """
    return char.isspace() and not "\x1c" <= char <= "\x1f"


def _is_word_separator(char: str) -> bool:
    if char <= "\x7f":
        return not (is_alpha_num(char) or char == _UNDERSCORE)
    if char.isalpha() or char.isdigit():
        return False
    return is_space(char)


def all_caps(string: str) -> str:
    """Convert string into upper case, replacing separators with underscores.

    Every non-alphanumeric character becomes exactly one underscore; runs of
    separators are not collapsed.

    Args:
        string: String to convert.

    Returns:
        Upper case string.

    Examples:
        >>> all_caps("pet-store v2")
        'PET_STORE_V2'
        >>> all_caps("a--b")
        'A__B'
    """
    return "".join(char.upper() if is_alpha_num(char) else _UNDERSCORE for char in string)


def snake_case(string: str) -> str:
    """Convert string into snake_case.

    Separators become underscores and the character right after them is
    lower-cased. Characters that do not follow a separator keep their case,
    so ``"XMLParser"`` is returned unchanged.

    Args:
        string: String to convert.

    Returns:
        Snake case string.

    Examples:
        >>> snake_case("Pet Store")
        'Pet_store'
        >>> snake_case("-Foo")
        '_foo'
    """
    result: list[str] = []
    was_underscore = False
    for char in string:
        if not is_alpha_num(char):
            result.append(_UNDERSCORE)
            was_underscore = True
            continue
        if was_underscore:
            char = char.lower()
        was_underscore = False
        result.append(char)
    return "".join(result)


def camel_case(string: str) -> str:
    """Convert string into CamelCase.

    Separators are dropped. The first character and every character that
    follows a separator are upper-cased; all other characters keep their case.

    Args:
        string: String to convert.

    Returns:
        Camel case string.

    Examples:
        >>> camel_case("foo_bar")
        'FooBar'
        >>> camel_case("XMLHttp")
        'XMLHttp'
    """
    result: list[str] = []
    first = True
    was_underscore = False
    for char in string:
        if not is_alpha_num(char):
            was_underscore = True
            continue
        if first or was_underscore:
            char = char.upper()
        first = False
        was_underscore = False
        result.append(char)
    return "".join(result)


def concat_spaces(string: str, title: bool = False) -> str:
    """Remove all whitespace from a string.

    Args:
        string: String to convert.
        title: Upper-case the character following each removed whitespace run.

    Returns:
        The string without whitespace.

    Examples:
        >>> concat_spaces("foo bar baz")
        'foobarbaz'
        >>> concat_spaces("foo bar baz", title=True)
        'fooBarBaz'
    """
    result: list[str] = []
    was_space = False
    for char in string:
        if is_space(char):
            was_space = True
            continue
        if was_space and title:
            char = _upper(char)
        result.append(char)
        was_space = False
    return "".join(result)


def clean_characters(string: str) -> str:
    """Replace every non-alphanumeric character with an underscore.

    Examples:
        >>> clean_characters("pet.store")
        'pet_store'
    """
    return "".join(char if is_alpha_num(char) else _UNDERSCORE for char in string)


def titlecase(string: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched.

    Unlike ``str.title`` the remainder of each word keeps its case, so
    ``"petId"`` becomes ``"PetId"``.
    """
    result: list[str] = []
    previous = " "
    for char in string:
        result.append(_upper(char) if _is_word_separator(previous) else char)
        previous = char
    return "".join(result)


def clean_and_title(string: str) -> str:
    """Title-case the words of a string and sanitize it into an identifier.

    Examples:
        >>> clean_and_title("get")
        'Get'
        >>> clean_and_title("pets:search")
        'Pets_Search'
    """
    return clean_characters(titlecase(string))


def package_name(string: str) -> str:
    """Build a protobuf package name.

    Examples:
        >>> package_name("Pet Store!")
        'petstore_'
    """
    return clean_characters("".join(_lower(char) for char in concat_spaces(string)))


def service_name(string: str) -> str:
    """Build a protobuf service name.

    Examples:
        >>> service_name("Pet Store")
        'PetStoreService'
        >>> service_name("pet store")
        'petStoreService'
    """
    return clean_characters(concat_spaces(string, title=True) + _SERVICE_SUFFIX)


def looks_like_integer(string: str) -> bool:
    """Check if every character of a string is an ASCII digit.

    The empty string has no offending character and therefore looks like an
    integer.

    Examples:
        >>> looks_like_integer("200")
        True
        >>> looks_like_integer("12a")
        False
        >>> looks_like_integer("")
        True
    """
    return all("0" <= char <= "9" for char in string)
