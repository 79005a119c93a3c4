"""
Contract deployment artifacts.

Two JSON files describe the one deployed contract this service knows about:

- the deployment record (``deployedTo``, ``transactionHash``)
- the compiled contract artifact, whose ``abi`` array lists the interface

Both are read once while the application starts. Missing files are reported
through :class:`ArtifactLoadResult` so the caller decides whether that is
fatal; files that exist but cannot be understood raise :class:`ArtifactError`.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class ArtifactError(Exception):
    """Raised when contract artifacts are missing or malformed."""

    pass


@dataclass(frozen=True)
class DeploymentRecord:
    """Address and creation transaction of the deployed contract."""

    deployed_to: str
    transaction_hash: str


@dataclass(frozen=True)
class InterfaceEntry:
    """One ABI entry. Only function entries are guaranteed a name."""

    entry_type: str  # "function", "event", "constructor", ...
    name: Optional[str] = None


@dataclass(frozen=True)
class ContractArtifacts:
    deployment: DeploymentRecord
    abi: Tuple[InterfaceEntry, ...]

    @classmethod
    def from_documents(
        cls, deploy_info: Dict[str, Any], artifact: Dict[str, Any]
    ) -> "ContractArtifacts":
        """Build artifacts from already parsed deployment and ABI documents."""
        return cls(
            deployment=_parse_deployment(deploy_info),
            abi=_parse_abi(artifact),
        )


@dataclass
class ArtifactLoadResult:
    artifacts: Optional[ContractArtifacts] = None
    missing: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.artifacts is not None

    def require(self) -> ContractArtifacts:
        """Return the artifacts or raise if any file was missing."""
        if self.artifacts is None:
            raise ArtifactError(
                f"Solidity artifacts not available. Missing: {', '.join(self.missing)}"
            )
        return self.artifacts


def _parse_deployment(deploy_info: Any) -> DeploymentRecord:
    if not isinstance(deploy_info, dict):
        raise ArtifactError("Deployment record must be a JSON object")

    for key in ("deployedTo", "transactionHash"):
        value = deploy_info.get(key)
        if not isinstance(value, str) or not value:
            raise ArtifactError(f"Deployment record field '{key}' is missing or not a string")

    return DeploymentRecord(
        deployed_to=deploy_info["deployedTo"],
        transaction_hash=deploy_info["transactionHash"],
    )


def _parse_abi(artifact: Any) -> Tuple[InterfaceEntry, ...]:
    if not isinstance(artifact, dict):
        raise ArtifactError("Contract artifact must be a JSON object")

    abi = artifact.get("abi")
    if not isinstance(abi, list):
        raise ArtifactError("Contract artifact field 'abi' is missing or not a list")

    entries = []
    for position, raw in enumerate(abi):
        if not isinstance(raw, dict):
            raise ArtifactError(f"ABI entry {position} is not an object")

        entry_type = raw.get("type")
        if not isinstance(entry_type, str):
            raise ArtifactError(f"ABI entry {position} has no 'type'")

        name = raw.get("name")
        if entry_type == "function" and not isinstance(name, str):
            raise ArtifactError(f"ABI function entry {position} has no 'name'")

        entries.append(InterfaceEntry(entry_type=entry_type, name=name))

    return tuple(entries)


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ArtifactError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ArtifactError(f"Cannot read {path}: {e}") from e


def load_artifacts(
    deploy_info_path: Union[str, Path], abi_path: Union[str, Path]
) -> ArtifactLoadResult:
    """
    Load the deployment record and contract ABI from disk.

    Returns a not-found result listing the absent files instead of raising.
    Raises ArtifactError when a present file is malformed.
    """
    paths = [Path(deploy_info_path), Path(abi_path)]
    missing = [str(p) for p in paths if not p.exists()]
    if missing:
        for path in missing:
            logger.warning(f"Contract artifact not found: {path}")
        return ArtifactLoadResult(missing=missing)

    artifacts = ContractArtifacts.from_documents(
        _read_json(paths[0]), _read_json(paths[1])
    )
    logger.info(
        f"Loaded contract artifacts for {artifacts.deployment.deployed_to} "
        f"({len(artifacts.abi)} ABI entries)"
    )
    return ArtifactLoadResult(artifacts=artifacts)
