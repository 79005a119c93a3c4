from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String
from sqlalchemy.sql import func

from listing_api.core.database import Base

PROPERTY_KINDS = ("residential", "commercial", "agricultural")


class PropertyType(Base):
    __tablename__ = "property_types"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=True)
    type = Column(
        Enum(*PROPERTY_KINDS, name="property_kind", native_enum=False, create_constraint=True),
        nullable=False,
    )
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    updated_on = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    created_on = Column(DateTime(timezone=True), server_default=func.now())
