# ticketdesk/ticket/schemas.py
from datetime import date

from pydantic import BaseModel

from ticketdesk.core.schemas import RecordOut


class TicketCreate(BaseModel):
    # Presence is enforced by the table, not here
    nombre: str | None = None
    fecha: str | None = None
    hora: str | None = None
    mensaje: str | None = None
    dni: str | None = None

    model_config = {"coerce_numbers_to_str": True}


class TicketOut(RecordOut):
    nombre: str
    fecha: date
    hora: str
    dni: str
    mensaje: str
