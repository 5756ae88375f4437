"""Party lookup API endpoints."""

import logging
from typing import Dict, List
from fastapi import APIRouter, HTTPException

from ..models.schemas import PartyColor, PartyInfo
from ..parties import (
    PARTY_COLORS,
    PARTY_NAMES,
    build_legend,
    get_party_color,
    is_known_party,
    legend_entry,
    to_css_color,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["parties"])


@router.get("/parties", response_model=List[PartyInfo])
async def list_parties():
    """Get every known party with its name and color, in legend order."""
    return build_legend()


@router.get("/parties/colors", response_model=Dict[str, str])
async def get_colors():
    """Get the raw code to color table."""
    return dict(PARTY_COLORS)


@router.get("/parties/names", response_model=Dict[str, str])
async def get_names():
    """Get the raw code to name table."""
    return dict(PARTY_NAMES)


@router.get("/parties/{code}/color", response_model=PartyColor)
async def get_color(code: str):
    """Get the color for a party code.

    Unknown codes get the neutral fallback color instead of an error.
    """
    known = code in PARTY_COLORS
    if not known:
        logger.info(f"No color for party code {code!r}, using fallback")
    color = get_party_color(code)
    return {
        "code": code,
        "color": color,
        "css_color": to_css_color(color),
        "known": known,
    }


@router.get("/parties/{code}", response_model=PartyInfo)
async def get_party(code: str):
    """Get name and color for a single party."""
    if not is_known_party(code):
        raise HTTPException(status_code=404, detail="Party not found")
    return legend_entry(code)
