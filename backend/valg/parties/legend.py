"""Legend listing joining the color and name tables."""

from typing import Optional, TypedDict

from .colors import PARTY_COLORS, get_party_color, to_css_color
from .names import PARTY_NAMES


class LegendEntry(TypedDict):
    """One party as shown in a legend."""
    code: str
    name: Optional[str]
    color: str
    css_color: str
    has_color: bool


def legend_entry(code: str) -> LegendEntry:
    """Build the legend entry for a single code."""
    color = get_party_color(code)
    return {
        "code": code,
        "name": PARTY_NAMES.get(code),
        "color": color,
        "css_color": to_css_color(color),
        "has_color": code in PARTY_COLORS,
    }


def build_legend() -> list[LegendEntry]:
    """
    List every known party.

    Codes from the color table come first in table order, followed by
    codes that only have a name.
    """
    codes = list(PARTY_COLORS)
    codes += [code for code in PARTY_NAMES if code not in PARTY_COLORS]
    return [legend_entry(code) for code in codes]
