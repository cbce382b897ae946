from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class UrlRef(BaseModel):
    url: str


class ResolveReport(BaseModel):
    collections: Dict[str, List[Union[str, UrlRef]]] = Field(default_factory=dict)
    headers: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)


class FindResult(BaseModel):
    type: str
    name: str
    path: Optional[str] = None


class TypeInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    as_keyword: Optional[str] = Field(default=None, alias="as")
    collection: str
    exts: List[str] = Field(default_factory=list)
    path: List[str] = Field(default_factory=list)
    warn: Optional[bool] = None
    link: Optional[bool] = None


class TypesList(BaseModel):
    types: List[TypeInfo] = Field(default_factory=list)


class GroupInfo(BaseModel):
    type: str
    name: str
    members: List[str] = Field(default_factory=list)


class GroupsList(BaseModel):
    groups: List[GroupInfo] = Field(default_factory=list)


__all__ = [
    "UrlRef",
    "ResolveReport",
    "FindResult",
    "TypeInfo",
    "TypesList",
    "GroupInfo",
    "GroupsList",
]
