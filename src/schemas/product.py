"""Product schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime) -> datetime:
    """Normalize to aware UTC; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class ProductCreate(BaseModel):
    """Fields accepted by /addproduct. The product id is always assigned server-side."""

    name: str = Field(..., min_length=1, max_length=255)
    image: str = Field(..., min_length=1, max_length=1024)
    category: str = Field(..., min_length=1, max_length=100)
    new_price: float
    old_price: float
    date: datetime | None = None
    available: bool = True

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime | None) -> datetime | None:
        # Stored dates must share one clock for /newCollections ordering
        return as_utc(value) if value is not None else None


class ProductRemove(BaseModel):
    """Remove a product by its public id."""

    id: int


class ProductResponse(BaseModel):
    """Product as exposed to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: str
    category: str
    new_price: float
    old_price: float
    date: datetime
    available: bool

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        # SQLite hands back naive UTC values
        return as_utc(value)


class ProductAdded(BaseModel):
    success: bool = True
    name: str


class SuccessResponse(BaseModel):
    success: bool = True


class UploadResponse(BaseModel):
    success: bool = True
    image_url: str
