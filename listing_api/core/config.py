from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Property Listing API"
    DATABASE_URL: str = "sqlite:///./listing.db"
    RPC_URL: str = "http://127.0.0.1:8545"

    # Hardhat/Foundry output, relative to the working directory
    DEPLOY_INFO_PATH: str = "solidity/deploy-info/deploy-localnet.json"
    CONTRACT_ARTIFACT_PATH: str = "solidity/build/Factory.sol/Factory.json"
    REQUIRE_CONTRACT_ARTIFACTS: bool = True

    CORS_ORIGINS: list[str] = ["*"]

    # This configures Pydantic to read variables from the ".env" file
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
