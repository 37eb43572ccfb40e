from typing import Any, Iterable, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from shared.core.exceptions import Violation
from shared.core.schemas import JsonOutResult, ViolationOut
from shared.utils.app_status_code import AppStatusCode


def success_response(data: Any, message: str = "Success",
                     status_code: str = AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY) -> JsonOutResult:
    return JsonOutResult(data=data, status="Success", status_code=status_code, message=message)


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED,
                   errors: Optional[Iterable[Violation]] = None, data: Any = None) -> JsonOutResult:
    return JsonOutResult(
        data=data,
        status="Failure",
        status_code=status_code,
        message=message,
        errors=[ViolationOut(field=v.field, rule=v.rule, message=v.message) for v in errors]
        if errors is not None else None,
    )


def failure_json(http_status: int, message: str, status_code: str = AppStatusCode.OPERATION_FAILED,
                 errors: Optional[Iterable[Violation]] = None, data: Any = None) -> JSONResponse:
    """Wrap a failure in the envelope and send it with the given HTTP status."""
    wrapped = error_response(message, status_code=status_code, errors=errors, data=data)
    return JSONResponse(content=jsonable_encoder(wrapped), status_code=http_status)
