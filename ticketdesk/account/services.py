# ticketdesk/account/services.py
from sqlalchemy.orm import Session

from ticketdesk.account.models import Account
from ticketdesk.account.schemas import AccountCreate


def register_account(db: Session, payload: AccountCreate) -> Account:
    db_account = Account(**payload.model_dump(exclude={"nombre"}))
    db.add(db_account)
    db.commit()
    db.refresh(db_account)
    return db_account


def authenticate(db: Session, username: str | None, password: str | None) -> bool:
    if username is None or password is None:
        return False
    account = (
        db.query(Account)
        .filter(Account.username == username, Account.password == password)
        .first()
    )
    return account is not None


def get_all_accounts(db: Session) -> list[Account]:
    return db.query(Account).all()


def delete_account(db: Session, account_id: int) -> bool:
    deleted = db.query(Account).filter(Account.id == account_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
