"""Static party lookup tables."""

from .colors import (
    FALLBACK_COLOR,
    PARTY_COLORS,
    get_party_color,
    get_party_css_color,
    to_css_color,
)
from .legend import LegendEntry, build_legend, legend_entry
from .names import PARTY_NAMES, get_display_name, get_party_name, is_known_party

__all__ = [
    "FALLBACK_COLOR",
    "PARTY_COLORS",
    "PARTY_NAMES",
    "LegendEntry",
    "build_legend",
    "get_display_name",
    "get_party_color",
    "get_party_css_color",
    "get_party_name",
    "is_known_party",
    "legend_entry",
    "to_css_color",
]
