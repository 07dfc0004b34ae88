# ticketdesk/submission/services.py
from sqlalchemy.orm import Session

from ticketdesk.submission.models import Submission
from ticketdesk.submission.schemas import SubmissionCreate


def create_submission(db: Session, payload: SubmissionCreate) -> Submission:
    db_submission = Submission(**payload.model_dump())
    db.add(db_submission)
    db.commit()
    db.refresh(db_submission)
    return db_submission


def get_all_submissions(db: Session) -> list[Submission]:
    return db.query(Submission).all()


def delete_submission(db: Session, submission_id: int) -> bool:
    deleted = (
        db.query(Submission)
        .filter(Submission.id == submission_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
