"""Heading text to label normalization."""

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Joined into a single "-" when they run together
_SEPARATORS = frozenset("/-")
# Deleted without starting or ending a separator run
_DROPPED = frozenset(",.`")


def normalize_label(text: str) -> str:
    """Derive the anchor label of a heading text.

    ASCII letters are lowercased, runs of whitespace, ``/`` and ``-`` become
    a single ``-``, and ``,``, ``.`` and backticks are deleted. Everything
    else is kept as is. Applying it to its own result changes nothing.

    >>> normalize_label("Some Section")
    'some-section'
    >>> normalize_label("`cmd_show`, the command")
    'cmd_show-the-command'
    """
    chars: list[str] = []
    in_separator = False
    for char in text.strip():
        if char.isspace() or char in _SEPARATORS:
            if not in_separator:
                chars.append("-")
                in_separator = True
        elif char in _DROPPED:
            continue
        else:
            chars.append(char)
            in_separator = False
    return "".join(chars).translate(_ASCII_LOWER)
