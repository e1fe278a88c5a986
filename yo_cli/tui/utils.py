"""Display helpers for generator names."""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])|([A-Z]+)([A-Z][a-z\d]+)")
_SEPARATORS = re.compile(r"[_-]+")
_SPACES = re.compile(r"\s{2,}")
_WORD_START = re.compile(r"(?:^|\s|-)\S")


def namespace_to_name(namespace: str) -> str:
    """``angular-fullstack:app`` -> ``angular-fullstack``."""
    return namespace.split(":")[0]


def decamelize(text: str, separator: str = "_") -> str:
    def _split(match):
        if match.group(1):
            return f"{match.group(1)}{separator}{match.group(2)}"
        return f"{match.group(3)}{separator}{match.group(4)}"

    return _CAMEL_BOUNDARY.sub(_split, text).lower()


def humanize_string(text: str) -> str:
    text = decamelize(text)
    text = _SEPARATORS.sub(" ", text)
    text = _SPACES.sub(" ", text).strip()
    return text[:1].upper() + text[1:]


def titleize(text: str) -> str:
    return _WORD_START.sub(lambda m: m.group(0).upper(), text.lower())


def pretty_name(namespace: str) -> str:
    """Human-readable title for a generator namespace."""
    return titleize(humanize_string(namespace_to_name(namespace)))
