# ticketdesk/account/models.py
from sqlalchemy import Column, Integer, String, UniqueConstraint

from ticketdesk.core.database import Base, TimestampMixin


class Account(TimestampMixin, Base):
    __tablename__ = "usuarios"
    __table_args__ = (UniqueConstraint("username", name="uq_usuarios_username"),)

    id = Column(Integer, primary_key=True)
    username = Column(String(255), nullable=False)
    # Stored and compared as plaintext, see DESIGN.md
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
