"""
Literal value decoding for C# enum initializers.

Enum member values are reported as the value a literal denotes rather than
its spelling: ``0x10`` becomes ``16``, ``10L`` becomes ``10`` and ``'c'``
becomes ``c``.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict

logger = logging.getLogger(__name__)

_INTEGER_SUFFIX = re.compile(r"[uUlL]+$")
_REAL_SUFFIX = re.compile(r"[fFdDmM]$")

_ESCAPE = re.compile(r"\\(u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|x[0-9a-fA-F]{1,4}|.)", re.DOTALL)

_SIMPLE_ESCAPES: Dict[str, str] = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

# Largest magnitude at which a double still prints as a plain integer
_PLAIN_INTEGER_LIMIT = 1e15


def _unescape(body: str) -> str:
    def replace(match: re.Match) -> str:
        escape = match.group(1)
        if escape[0] in "uUx" and len(escape) > 1:
            return chr(int(escape[1:], 16))
        return _SIMPLE_ESCAPES.get(escape, match.group(0))

    return _ESCAPE.sub(replace, body)


def decode_integer(text: str) -> str:
    digits = _INTEGER_SUFFIX.sub("", text).replace("_", "")
    lowered = digits.lower()
    if lowered.startswith("0x"):
        return str(int(digits[2:], 16))
    if lowered.startswith("0b"):
        return str(int(digits[2:], 2))
    return str(int(digits, 10))


def decode_real(text: str) -> str:
    suffix = text[-1:].lower() if _REAL_SUFFIX.search(text) else ""
    digits = _REAL_SUFFIX.sub("", text).replace("_", "")
    if suffix == "m":
        # Decimals keep their scale (1.50m -> 1.50)
        return str(Decimal(digits))
    value = float(digits)
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value).replace("e", "E")


def decode_character(text: str) -> str:
    return _unescape(text[1:-1])


def decode_string(text: str) -> str:
    return _unescape(text[1:-1])


def decode_verbatim_string(text: str) -> str:
    return text[2:-1].replace('""', '"')


def decode_raw_string(text: str) -> str:
    return text.strip('"')


_DECODERS: Dict[str, Callable[[str], str]] = {
    "integer_literal": decode_integer,
    "real_literal": decode_real,
    "character_literal": decode_character,
    "string_literal": decode_string,
    "verbatim_string_literal": decode_verbatim_string,
    "raw_string_literal": decode_raw_string,
}


def literal_value(node_type: str, text: str) -> str:
    """Return the value denoted by a literal token.

    Boolean and null literals, and any literal the decoder cannot read,
    are returned as written.

    Args:
        node_type: Grammar node type of the literal.
        text: Source text of the literal.

    Returns:
        The literal's value as text.
    """
    decoder = _DECODERS.get(node_type)
    if decoder is None:
        return text
    try:
        return decoder(text)
    except (ValueError, InvalidOperation) as e:
        logger.debug(f"Keeping {node_type} {text!r} as written: {e}")
        return text
