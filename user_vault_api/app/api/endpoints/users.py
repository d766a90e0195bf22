"""
User endpoints.

Translate wire JSON to ``UserService`` calls and back.  Malformed
bodies, ids and paging parameters are rejected by FastAPI before the
service is reached; service errors are turned into responses by the
exception handlers registered in ``app.main``.

The handlers are plain ``def`` functions: the service blocks on the
database, so FastAPI runs them in its threadpool.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status

from user_vault_api.app.api.deps import get_user_service
from user_vault_api.app.schemas.user import UserCreate, UserRead, UserReadWithAge, UserUpdate
from user_vault_api.app.services.user_service import UserService

router = APIRouter()

# Bounds of the integer types the store uses for ids and paging.
MAX_ID = 2 ** 63 - 1
MAX_PAGE_VALUE = 2 ** 31 - 1

DEFAULT_LIMIT = 50


def _user_id(user_id: int = Path(..., ge=-MAX_ID - 1, le=MAX_ID)) -> int:
    return user_id


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Зарегистрировать нового пользователя.

    Возвращает ``id``, ``name`` и ``dob`` созданной записи.  Возраст в
    ответ на создание не включается.
    """
    user = service.create_user(user_in.name, user_in.dob)
    return UserRead.from_user(user)


@router.get("", response_model=List[UserReadWithAge])
def list_users(
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_PAGE_VALUE),
    offset: int = Query(0, ge=0, le=MAX_PAGE_VALUE),
    service: UserService = Depends(get_user_service),
) -> List[UserReadWithAge]:
    """Return a page of users ordered by id, each with its current age."""
    users = service.list_users(limit=limit, offset=offset)
    return [UserReadWithAge.from_user(user) for user in users]


@router.get("/{user_id}", response_model=UserReadWithAge)
def get_user(
    user_id: int = Depends(_user_id),
    service: UserService = Depends(get_user_service),
) -> UserReadWithAge:
    """Retrieve a user by ID, including the derived age."""
    return UserReadWithAge.from_user(service.get_user(user_id))


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_in: UserUpdate,
    user_id: int = Depends(_user_id),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the name and date of birth of an existing user."""
    user = service.update_user(user_id, user_in.name, user_in.dob)
    return UserRead.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: int = Depends(_user_id),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Удалить пользователя по ID.  Ответ не содержит тела."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
