# ticketdesk/submission/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ticketdesk.core.database import get_db
from ticketdesk.core.errors import store_errors
from ticketdesk.core.schemas import MessageOut
from ticketdesk.submission import services as submission_service
from ticketdesk.submission.schemas import SubmissionAck, SubmissionCreate, SubmissionOut

router = APIRouter(prefix="/api", tags=["Submissions"])


@router.post("/contacto", response_model=SubmissionAck)
def create(submission: SubmissionCreate, db: Session = Depends(get_db)):
    if not submission.is_complete():
        raise HTTPException(status_code=400, detail="Todos los campos son requeridos")
    with store_errors("Error al guardar la solicitud"):
        submission_service.create_submission(db, submission)
    return {"success": True, "message": "Tu solicitud ha sido enviada al administrador."}


@router.get("/solicitudes", response_model=list[SubmissionOut])
def list_all(db: Session = Depends(get_db)):
    with store_errors("Error al obtener las solicitudes"):
        return submission_service.get_all_submissions(db)


@router.delete("/solicitudes/{submission_id}", response_model=MessageOut)
def delete(submission_id: str, db: Session = Depends(get_db)):
    with store_errors("Error al borrar la solicitud", ValueError):
        deleted = submission_service.delete_submission(db, int(submission_id))
    if not deleted:
        raise HTTPException(status_code=404, detail="Solicitud no encontrada")
    return {"message": "Solicitud eliminada"}
