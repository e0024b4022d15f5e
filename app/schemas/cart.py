from pydantic import BaseModel, ConfigDict, Field, StrictInt, constr
from pydantic.alias_generators import to_camel


class AddToCartRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: constr(strip_whitespace=True, min_length=1)
    quantity: StrictInt = Field(default=1, ge=1)
