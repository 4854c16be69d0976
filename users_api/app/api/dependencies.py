"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from users_api.app.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store owned by the application handling ``request``.

    ``create_app`` attaches one store per application instance, so two
    apps (for example in separate tests) never share users.
    """
    return request.app.state.user_store
