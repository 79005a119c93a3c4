from fastapi import APIRouter
from listing_api.api.endpoints import contracts, property_types, users

api_router = APIRouter()
api_router.include_router(contracts.router, prefix="/contracts", tags=["contracts"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(property_types.router, prefix="/property-types", tags=["property-types"])
