from pydantic import BaseModel
from typing import List
from datetime import datetime

from .product_schemas import ProductOut


class DashboardStatsResponse(BaseModel):
    totalProducts: int
    totalCategories: int
    totalSuppliers: int
    lowStockProducts: int
    lowStockProductsList: List[ProductOut]

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    status: str
    database: str
    timestamp: datetime
