"""Pydantic models for API responses."""

from typing import Optional
from pydantic import BaseModel


class PartyInfo(BaseModel):
    """A party as shown in a legend."""
    code: str
    name: Optional[str] = None
    color: str
    css_color: str
    has_color: bool


class PartyColor(BaseModel):
    """Color lookup result. Unknown codes carry the fallback color."""
    code: str
    color: str
    css_color: str
    known: bool
