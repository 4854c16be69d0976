"""
Pydantic models for user data.

``UserPayload`` is what clients send to create or update a user;
``UserRead`` is what the API returns.  On the wire both use the
capitalised field names ``Id``, ``Email`` and ``Name``.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class UserPayload(BaseModel):
    """Candidate user data submitted by a client.

    Both fields are optional at this level so that missing values can be
    reported by :func:`users_api.app.services.validation.validate_user`
    with its own messages instead of pydantic's.  Any ``Id`` sent by the
    client is dropped; identifiers are assigned by the store.
    """

    email: Optional[str] = Field(None, alias="Email", examples=["user@example.com"])
    name: Optional[str] = Field(None, alias="Name", examples=["Ann"])

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "UserPayload":
        """Build a payload from a decoded JSON object.

        Keys are matched case‑insensitively (``email``, ``Email`` and
        ``EMAIL`` are the same field).  When a body carries the same
        field under several casings, the last key in the body wins.
        Values that are not strings are treated as absent.
        """
        fields = {str(key).lower(): value for key, value in body.items()}
        return cls(email=_as_text(fields.get("email")), name=_as_text(fields.get("name")))


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., alias="Id", examples=[1])
    email: str = Field(..., alias="Email", examples=["user@example.com"])
    name: str = Field(..., alias="Name", examples=["Ann"])

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
