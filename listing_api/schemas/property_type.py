"""
Property type Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Literal, Optional
from datetime import datetime

PropertyKind = Literal["residential", "commercial", "agricultural"]


class PropertyTypeCreate(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    title: Optional[str] = None
    type: PropertyKind
    is_active: bool = True


class PropertyTypeResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        from_attributes=True,
    )

    id: int
    title: Optional[str] = None
    type: PropertyKind
    is_active: bool
    updated_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
