# app/schemas/supplier_schemas.py
from pydantic import BaseModel
from typing import Optional
from uuid import UUID
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# ---------------- Base Supplier ----------------
class SupplierBase(EmptyStringModel):
    name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


# ---------------- Supplier Create/Update ----------------
class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(SupplierBase):
    pass


# ---------------- Supplier Output ----------------
class SupplierOut(BaseModel):
    id: UUID
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    product_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
