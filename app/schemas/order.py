from typing import Optional
from pydantic import BaseModel, ConfigDict, constr
from pydantic.alias_generators import to_camel


class ShippingDetails(BaseModel):
    # Unknown keys such as totalAmount are dropped; totals are computed server-side
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    shipping_name: constr(strip_whitespace=True, min_length=1, max_length=100)
    shipping_address: constr(strip_whitespace=True, min_length=1)
    shipping_city: constr(strip_whitespace=True, min_length=1, max_length=100)
    shipping_phone: constr(strip_whitespace=True, min_length=1, max_length=30)
    notes: Optional[str] = None
