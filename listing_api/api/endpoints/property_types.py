"""
Property type endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from listing_api.core.database import get_db
from listing_api.models.property_type import PropertyType
from listing_api.schemas.error import ErrorResponse
from listing_api.schemas.property_type import PropertyTypeCreate, PropertyTypeResponse

router = APIRouter()


@router.post("", response_model=PropertyTypeResponse, status_code=201)
def create_property_type(property_type: PropertyTypeCreate, db: Session = Depends(get_db)):
    record = PropertyType(**property_type.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@router.get("", response_model=List[PropertyTypeResponse])
def list_property_types(active_only: bool = False, db: Session = Depends(get_db)):
    """
    Returns property types ordered by id. With active_only, retired types
    are left out.
    """
    query = db.query(PropertyType)
    if active_only:
        query = query.filter(PropertyType.is_active.is_(True))
    return query.order_by(PropertyType.id).all()


@router.get("/{property_type_id}", response_model=PropertyTypeResponse,
            responses={404: {"model": ErrorResponse}})
def get_property_type(property_type_id: int, db: Session = Depends(get_db)):
    record = db.query(PropertyType).filter(PropertyType.id == property_type_id).first()
    if record is None:
        return JSONResponse(status_code=404, content={"error": "Property type not found"})
    return record
