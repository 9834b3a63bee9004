# app/models.py
from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr,
    field_validator, model_validator,
)
from pydantic_core import PydanticCustomError
from typing import Any, Dict, Optional, Union

Number = Union[int, float]
# write bodies are stored as sent: no coercion of "12" or true into numbers
StrictNumber = Union[StrictInt, StrictFloat]


class _ProductFields(BaseModel):
    # wire names are camelCase (inStock); python attributes are snake_case
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_missing(cls, v: Any) -> Any:
        if v is None:
            raise PydanticCustomError("missing", "Field required")
        return v


class ProductIn(_ProductFields):
    """Body of POST /api/products. 0 and false are valid values."""
    name: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)
    price: StrictNumber
    category: StrictStr = Field(min_length=1)
    in_stock: StrictBool = Field(alias="inStock")


class ProductUpdate(_ProductFields):
    """Body of PUT /api/products/{id}: any subset of the product fields."""
    name: Optional[StrictStr] = Field(default=None, min_length=1)
    description: Optional[StrictStr] = Field(default=None, min_length=1)
    price: Optional[StrictNumber] = None
    category: Optional[StrictStr] = Field(default=None, min_length=1)
    in_stock: Optional[StrictBool] = Field(default=None, alias="inStock")

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "ProductUpdate":
        if not self.model_fields_set:
            raise PydanticCustomError("missing", "At least one product field is required")
        return self


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Number
    category: str
    in_stock: bool = Field(alias="inStock")


class DeletedProduct(BaseModel):
    message: str
    product: Product


class ProductStats(BaseModel):
    totalProducts: int
    categories: Dict[str, int]


def product_fields(payload: _ProductFields) -> Dict[str, Any]:
    """Wire-named dict of the fields the client actually sent."""
    return payload.model_dump(by_alias=True, exclude_unset=True)
