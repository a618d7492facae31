"""Identifier case conversion between configuration keys and record fields.

Configuration keys arrive in snake_case (``time_until_up``), record fields are
named in CamelCase (``TimeUntilUp``) and the iControl REST payload uses
lowerCamelCase (``timeUntilUp``). The converters below keep the exact legacy
transforms, which are not inverses of each other for every input:

    >>> to_camel_case("ip_dscp")
    'IpDscp'
    >>> to_snake_case("IpDscp")
    'ip_dscp'
    >>> to_snake_case(to_camel_case("http_2"))
    'http_2'
    >>> to_snake_case("HTTPMonitor")
    'http_monitor'
"""

import re

_CAMEL_BOUNDARY = re.compile(r"(^[A-Za-z])|_([A-Za-z])")
_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")


def to_camel_case(value: str) -> str:
    """Convert a snake_case identifier to CamelCase.

    Upper-cases a leading letter and every letter that follows an underscore,
    dropping that underscore. An underscore that is not followed by a letter
    is kept as-is (``"port_8080"`` stays ``"Port_8080"``).

    Args:
        value: Identifier to convert

    Returns:
        CamelCase form of the identifier
    """
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(0).replace("_", "").upper(), value)


def to_snake_case(value: str) -> str:
    """Convert a CamelCase or lowerCamelCase identifier to snake_case.

    Args:
        value: Identifier to convert

    Returns:
        Lower-cased identifier with underscores at word boundaries
    """
    snake = _FIRST_CAP.sub(r"\1_\2", value)
    snake = _ALL_CAP.sub(r"\1_\2", snake)
    return snake.lower()


def _is_separator(char: str) -> bool:
    """Word separators: ASCII characters other than letters, digits and "_", plus whitespace."""
    if char.isascii():
        return not (char.isalnum() or char == "_")
    return char.isspace()


def title_case(value: str) -> str:
    """Upper-case the first letter of every word.

    Letters, digits and underscores are word characters, so
    ``"send_string"`` becomes ``"Send_string"`` while ``"gateway-icmp"``
    becomes ``"Gateway-Icmp"``. Non-ASCII symbols such as ``"\u00a7"`` do not
    start a new word; non-ASCII whitespace does.
    """
    chars: list[str] = []
    previous = " "
    for char in value:
        if _is_separator(previous):
            char = char.upper()
        chars.append(char)
        previous = char
    return "".join(chars)


def lower_camel_case(value: str) -> str:
    """Convert a snake_case identifier to lowerCamelCase (REST attribute names)."""
    camel = to_camel_case(value)
    return camel[:1].lower() + camel[1:]
