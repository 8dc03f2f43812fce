"""
Server-rendered page schemas
"""
from typing import Dict, List, Optional

from pydantic import BaseModel


class LegacyTableView(BaseModel):
    """Product table of the server-rendered products page"""
    rows: List[Dict[str, str]]
    sort: Optional[str] = None
    query: str = ""


class LegacyCredentials(BaseModel):
    username: str
    password: str


class LegacyLoginForm(BaseModel):
    username: str = ""
    password: str = ""
