"""
Contract-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List


class ContractInstance(BaseModel):
    address: str
    methods: List[str]


class ContractResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    instance: ContractInstance
    transaction_hash: str


class ContractCount(BaseModel):
    count: int
