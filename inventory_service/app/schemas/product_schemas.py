# app/schemas/product_schemas.py
from pydantic import BaseModel, field_serializer, field_validator
from typing import List, Literal, Optional
from uuid import UUID
from datetime import datetime
from decimal import Decimal

from shared.core.schemas import CommonQueryParams, Lookup
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..models.product import DEFAULT_MIN_STOCK_LEVEL


# ---------------- Base Product ----------------
# Types only; field rules are enforced by validators.entity_validators
class ProductBase(EmptyStringModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[int] = None
    min_stock_level: Optional[int] = DEFAULT_MIN_STOCK_LEVEL
    category_id: Optional[UUID] = None
    supplier_id: Optional[UUID] = None

    @field_validator("min_stock_level")
    @classmethod
    def default_min_stock_level(cls, value):
        return DEFAULT_MIN_STOCK_LEVEL if value is None else value


# ---------------- Product Create/Update ----------------
class ProductCreate(ProductBase):
    sku: Optional[str] = None


class ProductUpdate(ProductBase):
    # sku is fixed at creation; a value sent here is ignored
    sku: Optional[str] = None


# ---------------- Product Request ----------------
class ProductRequest(CommonQueryParams):
    sort_by: Literal["name", "sku", "price", "quantity",
                     "created_at", "updated_at"] = "name"
    sort_dir: Literal["asc", "desc"] = "asc"


# ---------------- Product Output ----------------
class ProductOut(BaseModel):
    id: UUID
    name: str
    sku: str
    description: Optional[str] = None
    price: Decimal
    quantity: int
    min_stock_level: int
    category_id: Optional[UUID] = None
    supplier_id: Optional[UUID] = None
    category: Optional[Lookup] = None
    supplier: Optional[Lookup] = None
    is_low_stock: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

    @field_serializer("price")
    def serialize_price(self, price: Decimal):
        return float(price)


class ProductListResponse(BaseModel):
    products: List[ProductOut]
    total: int
    page: int
    size: int

    model_config = {"from_attributes": True}
