from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class ProductRequest(BaseModel):
    name: str = Field(..., examples=["Desk lamp"])
    description: str = Field(..., examples=["Adjustable LED desk lamp"])
    price: Decimal = Field(..., gt=0, examples=[24.99])

    @model_validator(mode="before")
    @classmethod
    def _drop_client_id(cls, data: Any) -> Any:
        """Clients echo the id back on update; the path parameter wins."""
        if isinstance(data, dict) and "id" in data:
            data = {key: value for key, value in data.items() if key != "id"}
        return data

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("price")
    @classmethod
    def _finite(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("must be a finite number")
        return value
