# ticketdesk/submission/models.py
from sqlalchemy import Column, Integer, String, Text

from ticketdesk.core.database import Base, TimestampMixin


class Submission(TimestampMixin, Base):
    __tablename__ = "solicitudes"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    mensaje = Column(Text, nullable=False)
