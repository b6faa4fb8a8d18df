from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, DateTime

from db import Base


class UserProfileRecord(Base):
    __tablename__ = "user_profiles"

    # Identity (supplied by the auth layer)
    id = Column(String(64), primary_key=True)
    email = Column(String(255))

    # Visa Journey
    current_visa = Column(String(32))

    # Qualifications
    education_level = Column(String(32))
    work_experience_years = Column(Integer)
    field_of_work = Column(String(255))
    country_of_citizenship = Column(String(2))
    english_level = Column(String(32))  # basic/intermediate/advanced/fluent
    investment_amount_usd = Column(Float)

    # Meta
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=False), default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
