"""
Party color table.

Colors are stored as bare OKLCH triples ("L C H"). Unknown codes fall back
to a neutral gray that is already wrapped as an ``oklch(...)`` call.
"""

from types import MappingProxyType
from typing import Mapping

_COLORS: dict[str, str] = {
    "R": "0.3657 0.1414 27.45",
    "SV": "0.498 0.1541 352.47",
    "Ap": "0.5074 0.1815 32.09",
    "Sp": "0.5703 0.0775 191.8",
    "MDG": "0.6134 0.1428 145.49",
    "V": "0.7196 0.1018 203.36",
    "KrF": "0.8005 0.1174 63.57",
    "H": "0.4978 0.1218 243.62",
    "Frp": "0.3635 0.1358 277.24",
    "A": "0.683 0 0",
}

# Read-only view for components that enumerate every party (legends)
PARTY_COLORS: Mapping[str, str] = MappingProxyType(_COLORS)

FALLBACK_COLOR = "oklch(0.8452 0 0)"


def get_party_color(code: str) -> str:
    """
    Look up the stored color for a party code.

    Args:
        code: Party code, e.g. "Ap"

    Returns:
        Stored OKLCH triple, or FALLBACK_COLOR if the code is unknown
    """
    return PARTY_COLORS.get(code) or FALLBACK_COLOR


def to_css_color(value: str) -> str:
    """Wrap a bare OKLCH triple as ``oklch(...)``; function calls pass through."""
    if "(" in value:
        return value
    return f"oklch({value})"


def get_party_css_color(code: str) -> str:
    """CSS-ready color for a party code."""
    return to_css_color(get_party_color(code))
