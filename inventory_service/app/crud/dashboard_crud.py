import logging
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import StoreFailureError
from shared.helpers.datetime_helper import utcnow
from . import category_crud, product_crud, supplier_crud
from ..schemas.dashboard_schemas import DashboardStatsResponse
from ..schemas.product_schemas import ProductOut

logger = logging.getLogger(__name__)


def get_dashboard_stats(db: Session) -> DashboardStatsResponse:
    """Recompute the overview counts and the low-stock list.

    Nothing is cached. A failure in any of the underlying queries fails the
    whole call; callers never see a partially filled summary.
    """
    try:
        low_stock_products = product_crud.get_low_stock_products(db)

        return DashboardStatsResponse(
            totalProducts=product_crud.get_total_product_count(db),
            totalCategories=category_crud.get_total_category_count(db),
            totalSuppliers=supplier_crud.get_total_supplier_count(db),
            lowStockProducts=len(low_stock_products),
            lowStockProductsList=[
                ProductOut.model_validate(p) for p in low_stock_products
            ],
        )
    except SQLAlchemyError as e:
        logger.exception("Error fetching dashboard stats")
        raise StoreFailureError(f"Error fetching dashboard stats: {e.__class__.__name__}") from e


def get_system_health(db: Session) -> Dict[str, Any]:
    try:
        db.execute(text("SELECT 1"))
        return {"status": "UP", "database": "Connected", "timestamp": utcnow()}
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return {"status": "DOWN", "database": "Unavailable", "timestamp": utcnow()}
