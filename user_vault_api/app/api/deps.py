"""
FastAPI dependencies.

``create_app`` stores the wired ``UserService`` on ``app.state``; routes
receive it through ``Depends(get_user_service)`` instead of importing a
module‑level instance.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
