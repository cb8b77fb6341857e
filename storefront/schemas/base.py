"""Base schema configuration shared by all request/response models"""

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated
from decimal import Decimal

# Largest value an INTEGER column holds on every supported backend
MAX_DB_INT = 2**31 - 1

# Decimal on the Python side, 2-place string on the wire
_as_money_string = PlainSerializer(lambda v: f"{v:.2f}", return_type=str, when_used="json")

# Stored amounts fit Numeric(10, 2)
Money = Annotated[Decimal, Field(max_digits=10, decimal_places=2), _as_money_string]

# Derived sums, never stored
MoneyTotal = Annotated[Decimal, _as_money_string]

class BaseSchema(BaseModel):
    """Base schema with camelCase aliases and ORM support"""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

class MessageResponse(BaseSchema):
    """Plain acknowledgement"""
    message: str
