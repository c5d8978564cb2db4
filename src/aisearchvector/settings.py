"""Settings for the Azure AI Search vector store."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AISearchVectorSettings(BaseSettings):
    """aisearchvector configuration settings."""

    # Azure AI Search
    AZURE_AI_SEARCH_ENDPOINT: Optional[str] = None
    AZURE_AI_SEARCH_API_KEY: Optional[str] = None
    AZURE_AI_SEARCH_API_VERSION: Optional[str] = None
    AZURE_AI_SEARCH_UPLOAD_BATCH_SIZE: int = 1000
    AZURE_AI_SEARCH_SEMANTIC_CONFIG: str = "default-semantic-config"

    # Vector settings
    VECTOR_METRIC: str = "cosine"
    VECTOR_SEARCH_LIMIT: int = 10
    LOG_LEVEL: str = "INFO"
    PRIMARY_KEY_MODE: Literal["uuid", "hash_vector", "auto"] = "uuid"  # choices: uuid, hash_vector, auto

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = AISearchVectorSettings()
