from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, constr
from pydantic.alias_generators import to_camel

Category = Literal["clothes", "perfumes", "accessories"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(_CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=200)
    description: constr(strip_whitespace=True, min_length=1)
    price: int = Field(gt=0)
    sale_price: Optional[int] = Field(default=None, gt=0)
    category: Category
    image_url: constr(strip_whitespace=True, min_length=1, max_length=500)
    materials: Optional[str] = None
    care: Optional[str] = None


class ProductPatch(_CamelModel):
    """Only the fields present in the payload are applied to the stored row."""

    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=200)] = None
    description: Optional[constr(strip_whitespace=True, min_length=1)] = None
    price: Optional[int] = Field(default=None, gt=0)
    sale_price: Optional[int] = Field(default=None, gt=0)
    category: Optional[Category] = None
    image_url: Optional[constr(strip_whitespace=True, min_length=1, max_length=500)] = None
    materials: Optional[str] = None
    care: Optional[str] = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        # name/price/etc. are NOT NULL columns; an explicit null only clears nullable ones
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in ("sale_price", "materials", "care")
        }


class ProductQuery(BaseModel):
    category: Optional[str] = None
    search: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
