"""
Contract lookup over the statically loaded deployment artifacts.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from listing_api.core.artifacts import ContractArtifacts


@dataclass(frozen=True)
class ContractDescriptor:
    address: str
    method_names: Tuple[str, ...]
    transaction_hash: str


class ContractLookupService:
    """Resolves an address to the single deployed contract, if it matches."""

    def __init__(self, artifacts: Optional[ContractArtifacts]):
        self.artifacts = artifacts

    def lookup(self, address) -> Optional[ContractDescriptor]:
        if not address or not isinstance(address, str):
            return None
        # Tolerated-missing mode: nothing is deployed
        if self.artifacts is None:
            return None

        deployment = self.artifacts.deployment
        if address.lower() != deployment.deployed_to.lower():
            return None

        return ContractDescriptor(
            address=deployment.deployed_to,
            method_names=tuple(
                entry.name for entry in self.artifacts.abi if entry.entry_type == "function"
            ),
            transaction_hash=deployment.transaction_hash,
        )
