"""
Health endpoint.

Reports whether the configured store answers a trivial query.  When the
application was built around a custom repository (no database file),
the check always succeeds.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from user_vault_api.app.core.db import ping

router = APIRouter()


@router.get("/health")
def health(request: Request) -> JSONResponse:
    database_path = request.app.state.database_path
    if database_path is not None and not ping(database_path):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return JSONResponse(content={"status": "ok"})
