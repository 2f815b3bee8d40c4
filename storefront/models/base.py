# storefront/models/base.py
from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices travel as JSON numbers but are kept as Decimal in the service layer
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class ApiModel(BaseModel):
    """Base model exchanged with the storefront client (camelCase on the wire)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
