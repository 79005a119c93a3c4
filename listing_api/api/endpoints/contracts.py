"""
Contract endpoints - read-only metadata for the deployed contract.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from listing_api.schemas.contract import (
    ContractCount,
    ContractInstance,
    ContractResponse,
)
from listing_api.schemas.error import ErrorResponse
from listing_api.services.contracts import ContractLookupService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_contract_service(request: Request) -> ContractLookupService:
    return request.app.state.contract_service


@router.get("/", response_model=List[ContractResponse])
def get_all():
    """Listing every contract is not implemented yet; always empty."""
    return []


@router.get("/count", response_model=ContractCount)
def get_count():
    """Placeholder count. Always 0, even when a contract is deployed."""
    return ContractCount(count=0)


@router.get("/by-address/{address}", response_model=ContractResponse,
            responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
def get_by_address(
    address: str, service: ContractLookupService = Depends(get_contract_service)
):
    """
    Get the deployed contract's address, function names and deployment
    transaction hash. The address comparison ignores letter case.
    """
    try:
        contract = service.lookup(address)

        if contract is None:
            return JSONResponse(status_code=404, content={"error": "Contract not found"})

        return ContractResponse(
            instance=ContractInstance(
                address=contract.address,
                methods=list(contract.method_names),
            ),
            transaction_hash=contract.transaction_hash,
        )
    except Exception as e:
        logger.error(f"Error looking up contract {address}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


@router.get("/{index}", responses={404: {"model": ErrorResponse}})
def get_by_index(index: str):
    return JSONResponse(status_code=404, content={"error": "Not implemented"})
