# ticketdesk/ticket/routes.py
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ticketdesk.core.database import get_db
from ticketdesk.core.errors import store_errors
from ticketdesk.core.schemas import MessageOut
from ticketdesk.ticket import services as ticket_service
from ticketdesk.ticket.schemas import TicketCreate, TicketOut

router = APIRouter(prefix="/api/ticket", tags=["Tickets"])


@router.post("", response_model=TicketOut)
def create(payload: Any = Body(default=None), db: Session = Depends(get_db)):
    with store_errors("Error al crear el ticket", ValueError):
        # A missing body or mistyped field fails like a store constraint
        ticket = TicketCreate.model_validate(payload or {})
        return ticket_service.create_ticket(db, ticket)


@router.get("", response_model=list[TicketOut])
def list_by_dni(
    dni: str | None = Query(default=None, description="Identifier the tickets were filed under"),
    db: Session = Depends(get_db),
):
    if not dni:
        raise HTTPException(status_code=400, detail="dni requerido para filtrar tickets")
    with store_errors("Error al obtener los tickets"):
        return ticket_service.get_tickets_by_dni(db, dni)


@router.delete("/{ticket_id}", response_model=MessageOut)
def delete(ticket_id: str, db: Session = Depends(get_db)):
    with store_errors("Error al borrar el ticket", ValueError):
        deleted = ticket_service.delete_ticket(db, int(ticket_id))
    if not deleted:
        raise HTTPException(status_code=404, detail="Ticket no encontrado")
    return {"message": "Ticket eliminado"}
