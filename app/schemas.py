from pydantic import BaseModel, ConfigDict, Field
from typing import List

# Field names follow the public JSON contract (camelCase)
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    total: str
    items: List[Item]

class IdResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
