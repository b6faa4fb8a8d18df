import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from navigator.models import UserProfileRecord
from navigator.logic.adapter import record_to_profile, profile_to_record_values
from navigator.logic.contracts import UserProfile

logger = logging.getLogger(__name__)

def get_profile_record(db: Session, user_id: str) -> UserProfileRecord | None:
    return db.execute(select(UserProfileRecord).where(UserProfileRecord.id == user_id)).scalar_one_or_none()

def load_profile(db: Session, user_id: str) -> Optional[UserProfile]:
    if not user_id:
        logger.warning("load_profile: no user_id provided")
        return None
    record = get_profile_record(db, user_id)
    return record_to_profile(record) if record else None

def save_profile(db: Session, user_id: str, profile: UserProfile, *, email: str | None = None) -> bool:
    if not user_id:
        logger.warning("save_profile: no user_id provided")
        return False
    try:
        record = get_profile_record(db, user_id)
        if record is None:
            record = UserProfileRecord(id=user_id)
            db.add(record)
        for column, value in profile_to_record_values(profile).items():
            setattr(record, column, value)
        if email is not None:
            record.email = email
        db.flush()
        return True
    except SQLAlchemyError as e:
        logger.error(f"Failed to save profile for {user_id}: {e}")
        db.rollback()
        return False
