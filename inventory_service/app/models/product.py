# app/models/product.py
import uuid
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from shared.core.database import Base
from shared.helpers.datetime_helper import utcnow

DEFAULT_MIN_STOCK_LEVEL = 10


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
        CheckConstraint("min_stock_level >= 0",
                        name="ck_products_min_stock_level_non_negative"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    sku = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(String(500))
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    min_stock_level = Column(Integer, nullable=False,
                             default=DEFAULT_MIN_STOCK_LEVEL)

    category_id = Column(UUID(as_uuid=True), ForeignKey(
        "categories.id", ondelete="RESTRICT"), nullable=True, index=True)
    supplier_id = Column(UUID(as_uuid=True), ForeignKey(
        "suppliers.id", ondelete="RESTRICT"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False,
                        default=utcnow, onupdate=utcnow)

    # Many-to-one only; categories and suppliers hold no product collections
    category = relationship("Category", lazy="joined")
    supplier = relationship("Supplier", lazy="joined")

    @property
    def is_low_stock(self) -> bool:
        return (
            self.quantity is not None
            and self.min_stock_level is not None
            and self.quantity <= self.min_stock_level
        )

    def touch(self):
        self.updated_at = utcnow()
