"""
User-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    fname: str = Field(min_length=1)
    lname: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_no: str = Field(min_length=1)
    password: str = Field(min_length=8)
    state_id: Optional[int] = None
    city_id: Optional[int] = None
    pincode: Optional[int] = None
    user_type: int = 1
    is_admin: bool = False


class UserResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        from_attributes=True,
    )

    id: int
    fname: str
    lname: str
    email: str
    phone_no: str
    state_id: Optional[int] = None
    city_id: Optional[int] = None
    pincode: Optional[int] = None
    user_type: int
    is_admin: bool
    updated_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
