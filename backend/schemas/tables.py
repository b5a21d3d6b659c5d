from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class TableCreate(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    number: int = Field(..., gt=0)
    places: int = Field(..., gt=0)
    is_vip: bool = False
    min_order: float = Field(default=0, ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TableCreateResponse(BaseModel):
    id: str


class TableResponse(BaseModel):
    id: str
    number: int
    places: int
    is_vip: bool
    min_order: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class TableListResponse(BaseModel):
    tables: list[TableResponse]
