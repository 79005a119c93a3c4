import os

# Keep the app's own engine (lifespan, /health) off the filesystem
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from listing_api.core.artifacts import ContractArtifacts
from listing_api.core.database import Base, get_db
from listing_api.main import create_app

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DEPLOY_TX_HASH = "0x1c6a1d8f6fd1c7a4a8e9e4f1b0a3c6e9f2b5a8c1d4e7f0a3b6c9d2e5f8a1b4c7"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@pytest.fixture
def deploy_info():
    return {
        "deployer": "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
        "deployedTo": DEPLOYED_ADDRESS,
        "transactionHash": DEPLOY_TX_HASH,
    }


@pytest.fixture
def factory_artifact():
    return {
        "contractName": "Factory",
        "abi": [
            {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
            {"type": "function", "name": "createProperty", "inputs": [], "outputs": []},
            {"type": "event", "name": "PropertyCreated", "inputs": [], "anonymous": False},
            {"type": "function", "name": "getProperty", "inputs": [], "outputs": []},
            {"type": "function", "name": "propertyCount", "inputs": [], "outputs": []},
        ],
    }


@pytest.fixture
def artifacts(deploy_info, factory_artifact):
    return ContractArtifacts.from_documents(deploy_info, factory_artifact)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def app(artifacts):
    return create_app(artifacts=artifacts)


@pytest.fixture
def client(app, db):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
