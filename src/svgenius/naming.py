"""Component name derivation."""

import re
from pathlib import Path

from .errors import ComponentNameError

# Acronym run (not followed by lowercase), capitalized/lowercase word, digit run
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

# Prefix for names that would otherwise start with a digit
DIGIT_PREFIX = "Svg"

DEFAULT_COMPONENT_NAME = "SvgComponent"


def split_words(raw: str) -> list[str]:
    """Split a string into words.

    Words break on non-alphanumeric characters, lower-to-upper case
    transitions and letter/digit transitions. An uppercase run stays a
    single word, except that its last capital starts the next word when
    lowercase letters follow.

    Example:
        >>> split_words("XMLParser-v2")
        ['XML', 'Parser', 'v', '2']
    """
    return _WORD_RE.findall(raw)


def derive_component_name(raw: str) -> str:
    """Derive a PascalCase component identifier.

    Args:
        raw: Arbitrary string such as a file stem or a requested name.

    Returns:
        Identifier made of ASCII letters and digits, starting with an
        uppercase letter.

    Raises:
        ComponentNameError: If the string contains no ASCII letters or digits.

    Example:
        >>> derive_component_name("my-icon-24")
        'MyIcon24'
        >>> derive_component_name("XMLParser")
        'XMLParser'
    """
    words = split_words(raw)
    if not words:
        raise ComponentNameError(
            f"Cannot derive a component name from {raw!r}: "
            "no letters or digits"
        )

    name = "".join(word[0].upper() + word[1:] for word in words)
    if name[0].isdigit():
        name = DIGIT_PREFIX + name
    return name


def component_name_from_path(path: Path | str) -> str:
    """Derive a component name from a file name, ignoring its extension."""
    return derive_component_name(Path(path).stem)
