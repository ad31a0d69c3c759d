import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from status_api.core.db import DatabaseUnavailable, UserGateway
from status_api.models.schemas import ErrorResponse, StatusErrorResponse, StatusResponse

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"

router = APIRouter(prefix="/api")


def get_gateway(request: Request) -> UserGateway:
    return request.app.state.gateway


def is_admin_row(row: Optional[dict[str, Any]]) -> bool:
    return row is not None and row.get("role") == ADMIN_ROLE


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    summary="Database and admin status",
    response_model=StatusResponse,
    responses={503: {"model": StatusErrorResponse}, 405: {"model": ErrorResponse}},
)
@router.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
async def database_status(gateway: UserGateway = Depends(get_gateway)):
    try:
        first = await gateway.fetch_first_user()
    except DatabaseUnavailable as exc:
        # Detail stays in the logs, the client only sees the generic code
        logger.error("[db] unavailable: %s", exc)
        return JSONResponse(status_code=503, content=StatusErrorResponse().model_dump())

    return StatusResponse(database=True, userAdmin=is_admin_row(first))
