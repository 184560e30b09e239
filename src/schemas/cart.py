"""Cart schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CartData = dict[str, int]


class CartItemRequest(BaseModel):
    """Cart mutation request addressing one item slot."""

    model_config = ConfigDict(populate_by_name=True)

    item_id: str = Field(..., alias="itemId", min_length=1, max_length=64)

    @field_validator("item_id", mode="before")
    @classmethod
    def coerce_item_id(cls, value: Any) -> Any:
        """Cart keys are strings; accept whole-number ids from clients."""
        if isinstance(value, bool):
            raise ValueError("itemId must be a string or integer")
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("itemId must be a whole number")
            return str(int(value))
        return value
