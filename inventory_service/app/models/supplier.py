# app/models/supplier.py
import uuid
from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import UUID
from shared.core.database import Base
from shared.helpers.datetime_helper import utcnow


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    contact_person = Column(String(100))
    # NULL emails do not collide with each other under the unique constraint
    email = Column(String(100), unique=True, nullable=True)
    phone = Column(String(20))
    address = Column(String(200))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False,
                        default=utcnow, onupdate=utcnow)
