"""
Color literal normalization.

Finds hex and ``rgb()``/``rgba()`` color literals inside CSS declaration
values and converts each to a canonical lowercase ``#rrggbb`` string.
Alpha channels are ignored: color identity is RGB only.
"""

import re

import webcolors

from repo_palette.exceptions import ColorParseError

# Loose numeric grammar: optional sign, optional integer part, optional percent
_NUMBER = r"[+-]?\d*\.?\d+%?"

_HEX = r"(?<![\w#])#(?:[0-9a-f]{6}|[0-9a-f]{3})(?![0-9a-f])"

_FUNCTIONAL = (
    r"(?<![\w-])rgba?\(\s*"
    rf"(?P<red>{_NUMBER})\s*,\s*"
    rf"(?P<green>{_NUMBER})\s*,\s*"
    rf"(?P<blue>{_NUMBER})\s*"
    rf"(?:,\s*(?P<alpha>{_NUMBER})\s*)?"
    r"\)"
)

COLOR_PATTERN = re.compile(f"{_HEX}|{_FUNCTIONAL}", re.IGNORECASE)

_HEX_PATTERN = re.compile(_HEX, re.IGNORECASE)
_FUNCTIONAL_PATTERN = re.compile(_FUNCTIONAL, re.IGNORECASE)


def normalize_color(token: str) -> str:
    """
    Convert a matched color literal to canonical ``#rrggbb`` form.

    Args:
        token: A hex literal (``#abc``, ``#AABBCC``) or an ``rgb()``/``rgba()``
            call with three channels and an optional alpha channel

    Returns:
        Lowercase six-digit hex string

    Raises:
        ColorParseError: If the token is not a color or a channel is out of range
    """
    token = token.strip()

    if _HEX_PATTERN.fullmatch(token):
        return webcolors.normalize_hex(token)

    match = _FUNCTIONAL_PATTERN.fullmatch(token)
    if match is None:
        raise ColorParseError(token, f"Not a color literal: {token!r}")

    channels = (match.group("red"), match.group("green"), match.group("blue"))
    percents = [channel.endswith("%") for channel in channels]

    if all(percents):
        return webcolors.rgb_percent_to_hex(
            tuple(_percent_channel(token, channel) for channel in channels)
        )
    if any(percents):
        raise ColorParseError(token, f"Mixed percent and integer channels: {token!r}")

    return webcolors.rgb_to_hex(
        tuple(_integer_channel(token, channel) for channel in channels)
    )


def find_colors(value: str) -> list[str]:
    """
    Find every color literal in a declaration value.

    Tokens that match the color grammar but do not resolve to a color are
    dropped silently.

    Args:
        value: Declaration value, e.g. ``linear-gradient(#fff, rgb(0, 0, 0))``

    Returns:
        Canonical colors in the order they appear (duplicates kept)
    """
    colors: list[str] = []
    for match in COLOR_PATTERN.finditer(value):
        try:
            colors.append(normalize_color(match.group(0)))
        except ColorParseError:
            continue
    return colors


def _integer_channel(token: str, channel: str) -> int:
    number = float(channel)
    if not number.is_integer() or not 0 <= number <= 255:
        raise ColorParseError(token, f"Channel {channel!r} is not an integer in 0-255")
    return int(number)


def _percent_channel(token: str, channel: str) -> str:
    number = float(channel.rstrip("%"))
    if not 0 <= number <= 100:
        raise ColorParseError(token, f"Channel {channel!r} is not a percentage in 0-100")
    # webcolors expects a plain decimal "N%" string
    return f"{number:.6f}".rstrip("0").rstrip(".") + "%"
