# ticketdesk/ticket/services.py
from datetime import date

from sqlalchemy.orm import Session

from ticketdesk.ticket.models import Ticket
from ticketdesk.ticket.schemas import TicketCreate


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    # Missing fields stay NULL so the NOT NULL columns reject them
    data = payload.model_dump()
    if data["fecha"] is not None:
        data["fecha"] = date.fromisoformat(data["fecha"])
    db_ticket = Ticket(**data)
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    return db_ticket


def get_tickets_by_dni(db: Session, dni: str) -> list[Ticket]:
    return (
        db.query(Ticket)
        .filter(Ticket.dni == dni)
        .order_by(Ticket.created_at.desc(), Ticket.id.desc())
        .all()
    )


def delete_ticket(db: Session, ticket_id: int) -> bool:
    deleted = db.query(Ticket).filter(Ticket.id == ticket_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
