from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


def _parse_int(value):
    # Form fields arrive as text; only plain base-10 integers are accepted
    if isinstance(value, str):
        return int(value.strip(), 10)
    return value


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self):
        return self.model_dump(by_alias=True)


class ProductIn(_Schema):
    name: str
    category: str = ""
    description: str = ""
    default_size: str = Field("", alias="defaultSize")
    price: int = Field(ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value):
        return _parse_int(value)


class Product(ProductIn):
    id: str
    image_path: str = Field("", alias="imagePath")
    rating: int = 0
    reviews: List[dict] = Field(default_factory=list)


class OrderItemIn(_Schema):
    product_id: str = Field(alias="productId")
    size: str = ""
    quantity: int = Field(1, ge=1)

    @field_validator("quantity", mode="before")
    @classmethod
    def parse_quantity(cls, value):
        return _parse_int(value)


class OrderIn(_Schema):
    customer_name: str = Field(alias="customerName")
    phone: str = ""
    address: str = ""
    items: List[OrderItemIn] = Field(min_length=1)

    @field_validator("customer_name")
    @classmethod
    def customer_not_blank(cls, value):
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class OrderItem(_Schema):
    product_id: str = Field(alias="productId")
    name: str
    size: str = ""
    quantity: int
    price: int


class Order(_Schema):
    id: str
    customer_name: str = Field(alias="customerName")
    phone: str = ""
    address: str = ""
    items: List[OrderItem]
    total: int
    status: str = "pending"
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        alias="createdAt",
    )


def format_errors(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``field: message; ...``."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)
