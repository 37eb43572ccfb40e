from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_inventory_db as get_db
from shared.core.schemas import JsonOutResult
from shared.helpers.json_response_helper import failure_json, success_response
from shared.utils.app_status_code import AppStatusCode
from ..crud import dashboard_crud
from ..schemas.dashboard_schemas import DashboardStatsResponse, HealthResponse

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=JsonOutResult[DashboardStatsResponse])
def get_dashboard_stats(db: Session = Depends(get_db)):
    return success_response(dashboard_crud.get_dashboard_stats(db))


@router.get("/health", response_model=JsonOutResult[HealthResponse])
def get_system_health(db: Session = Depends(get_db)):
    health = dashboard_crud.get_system_health(db)
    if health["status"] != "UP":
        return failure_json(
            503,
            "Database unavailable",
            status_code=AppStatusCode.STORE_UNAVAILABLE,
            data=health,
        )
    return success_response(HealthResponse(**health))
