# ticketdesk/account/schemas.py
from pydantic import BaseModel

from ticketdesk.core.schemas import RecordOut


class AccountCreate(BaseModel):
    username: str | None = None
    password: str | None = None
    email: str | None = None
    # Sent by the registration form, never stored
    nombre: str | None = None

    model_config = {"coerce_numbers_to_str": True}


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None

    model_config = {"coerce_numbers_to_str": True}


class LoginOut(BaseModel):
    success: bool


class AccountOut(RecordOut):
    username: str
    password: str
    email: str | None = None
