# ticketdesk/ticket/models.py
from sqlalchemy import Column, Date, Integer, String, Text

from ticketdesk.core.database import Base, TimestampMixin


class Ticket(TimestampMixin, Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    fecha = Column(Date, nullable=False)
    hora = Column(String(255), nullable=False)
    dni = Column(String(255), nullable=False, index=True)
    mensaje = Column(Text, nullable=False)
