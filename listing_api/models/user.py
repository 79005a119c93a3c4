from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from listing_api.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    fname = Column(String(255), nullable=False)
    lname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone_no = Column(String(32), nullable=False, unique=True)
    password = Column(String(255), nullable=False)  # pbkdf2_sha256$<iterations>$<salt>$<hash>

    # Lookup tables for these live outside this service
    state_id = Column(Integer, nullable=True)
    city_id = Column(Integer, nullable=True)
    pincode = Column(Integer, nullable=True)

    user_type = Column(Integer, default=1, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    updated_on = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    created_on = Column(DateTime(timezone=True), server_default=func.now())
