"""
Party name table for Norwegian parliamentary parties.

PARTY_NAMES is plain data; indexing an unknown code raises KeyError.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from .colors import PARTY_COLORS

_NAMES: dict[str, str] = {
    "R": "Rødt",
    "SV": "Sosialistisk Venstreparti",
    "Ap": "Arbeiderpartiet",
    "Sp": "Senterpartiet",
    "MDG": "Miljøpartiet De Grønne",
    "V": "Venstre",
    "KrF": "Kristelig Folkeparti",
    "H": "Høyre",
    "Frp": "Fremskrittspartiet",
    "A": "Andre",
}

PARTY_NAMES: Mapping[str, str] = MappingProxyType(_NAMES)


def get_party_name(code: str) -> Optional[str]:
    """Full name for a party code, or None if unknown."""
    return PARTY_NAMES.get(code)


def get_display_name(code: str) -> str:
    """
    Get a label suitable for display.

    Args:
        code: Party code

    Returns:
        Full party name, or the code itself if unknown
    """
    return PARTY_NAMES.get(code, code)


def is_known_party(code: str) -> bool:
    """
    Check if a party code is recognized.

    Args:
        code: Party code to check

    Returns:
        True if the code has a color or a name
    """
    return code in PARTY_COLORS or code in PARTY_NAMES
