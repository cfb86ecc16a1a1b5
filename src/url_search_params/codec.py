"""Percent-encoding of a fixed set of characters.

Only the characters listed in :data:`~url_search_params.symbols.ESCAPES` are
touched; everything else, including unknown ``%XX`` sequences, passes through
as is.
"""

from .symbols import DECODE_ONLY as _DECODE_ONLY, ESCAPES as _ESCAPES

_PERCENT, _PERCENT_CODE = _ESCAPES[0]

_DECODE_TABLE = (*_ESCAPES[1:], *_DECODE_ONLY)


def encode_uri_component(component: str) -> str:
    """Escape every character of the escape table with its ``%XX`` code.

    ``?`` is not part of the table and is left as is.
    """
    for char, code in _ESCAPES:
        component = component.replace(char, code)
    return component


def decode_uri_component(component: str) -> str:
    """Inverse of :func:`encode_uri_component`, also turning ``%3F`` into ``?``."""
    if _PERCENT not in component:
        return component
    for char, code in _DECODE_TABLE:
        component = component.replace(code, char)
    # last, or "%2520" would come back as " " instead of "%20"
    return component.replace(_PERCENT_CODE, _PERCENT)
