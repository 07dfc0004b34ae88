# ticketdesk/account/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ticketdesk.account import services as account_service
from ticketdesk.account.schemas import AccountCreate, AccountOut, LoginOut, LoginRequest
from ticketdesk.core.database import get_db
from ticketdesk.core.errors import store_errors
from ticketdesk.core.schemas import MessageOut

router = APIRouter(prefix="/api", tags=["Accounts"])


@router.post("/register", response_model=AccountOut)
def register(account: AccountCreate, db: Session = Depends(get_db)):
    with store_errors("Usuario ya existe", status_code=400):
        return account_service.register_account(db, account)


@router.post("/login", response_model=LoginOut)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    if not account_service.authenticate(db, credentials.username, credentials.password):
        raise HTTPException(status_code=401, detail="Credenciales inválidas")
    return {"success": True}


@router.get("/usuarios", response_model=list[AccountOut])
def list_all(db: Session = Depends(get_db)):
    with store_errors("Error al obtener los usuarios"):
        return account_service.get_all_accounts(db)


@router.delete("/usuarios/{account_id}", response_model=MessageOut)
def delete(account_id: str, db: Session = Depends(get_db)):
    with store_errors("Error al borrar el usuario", ValueError):
        deleted = account_service.delete_account(db, int(account_id))
    if not deleted:
        raise HTTPException(status_code=404, detail="Usuario no encontrado")
    return {"message": "Usuario eliminado"}
