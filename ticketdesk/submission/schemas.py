# ticketdesk/submission/schemas.py
from pydantic import BaseModel

from ticketdesk.core.schemas import RecordOut


class SubmissionCreate(BaseModel):
    nombre: str | None = None
    email: str | None = None
    mensaje: str | None = None

    model_config = {"coerce_numbers_to_str": True}

    def is_complete(self) -> bool:
        return bool(self.nombre and self.email and self.mensaje)


class SubmissionAck(BaseModel):
    success: bool
    message: str


class SubmissionOut(RecordOut):
    nombre: str
    email: str
    mensaje: str
