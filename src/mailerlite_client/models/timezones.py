"""
Timezone payloads.
"""
from typing import List

from pydantic import Field

from .common import ApiModel


class Timezone(ApiModel):
    id: str
    name: str = ""
    name_for_humans: str = ""
    offset_name: str = ""
    offset: int = 0


class TimezoneList(ApiModel):
    data: List[Timezone] = Field(default_factory=list)
