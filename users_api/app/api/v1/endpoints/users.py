"""
User endpoints for API v1.

Create, list, read, update and delete users held in the in‑memory
``UserStore``.  Mutating routes validate the payload first and answer
400 with ``{"errors": [...]}`` when any rule fails.  Unknown ids get a
404 with an empty body.  The ``{user_id:int}`` convertor means a
non‑numeric id does not match these routes at all.

Authentication, request logging and error translation are handled by
the middleware chain, not here.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from users_api.app.api.dependencies import get_user_store
from users_api.app.schemas.user import UserPayload, UserRead
from users_api.app.services.user_store import UserStore
from users_api.app.services.validation import validate_user

logger = logging.getLogger(__name__)

router = APIRouter()


def _validation_failed(errors: List[str]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    response: Response,
    body: Dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
):
    """Create a user.

    The id is always assigned by the store; an ``Id`` in the body is
    ignored.  Responds with the created user and a ``Location`` header
    pointing at it.
    """
    payload = UserPayload.from_body(body)
    errors = validate_user(payload)
    if errors:
        return _validation_failed(errors)

    user_id = store.insert(payload)
    logger.info("Created user %s", user_id)
    response.headers["Location"] = str(request.app.url_path_for("get_user", user_id=user_id))
    return UserRead(id=user_id, email=payload.email, name=payload.name)


@router.get("", response_model=List[UserRead])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return all users."""
    return store.list_all()


@router.get("/{user_id:int}", response_model=UserRead)
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)):
    user = store.get(user_id)
    if user is None:
        return _not_found()
    return user


@router.put("/{user_id:int}", response_model=UserRead)
async def update_user(
    user_id: int,
    body: Dict[str, Any] = Body(...),
    store: UserStore = Depends(get_user_store),
):
    """Replace the Email and Name of an existing user.

    A missing id wins over an invalid payload: the existence check
    runs before validation.
    """
    if store.get(user_id) is None:
        return _not_found()

    payload = UserPayload.from_body(body)
    errors = validate_user(payload)
    if errors:
        return _validation_failed(errors)

    user = store.update(user_id, name=payload.name, email=payload.email)
    if user is None:
        # Deleted by a concurrent request after the existence check.
        return _not_found()
    logger.info("Updated user %s", user_id)
    return user


@router.delete("/{user_id:int}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)) -> Response:
    if not store.remove(user_id):
        return _not_found()
    logger.info("Deleted user %s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
