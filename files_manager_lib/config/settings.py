"""
Connection settings for the document store and key-value store.

The document store is configured through environment variables, optionally
seeded from a dotenv file:

    DB_HOST      document store host           (default: localhost)
    DB_PORT      document store port           (default: 27017)
    DB_DATABASE  document store database name  (default: files_manager)

Which dotenv file is read depends on FILES_MANAGER_ENV: anything containing
"test" or "cover" reads ``.env.test``, everything else reads ``.env``. Real
environment variables always win over the file, and a missing file is ignored.

The key-value store has no override variables; it uses the redis driver defaults.

Example:
-------
    from files_manager_lib.config import load_document_store_settings

    settings = load_document_store_settings()
    print(settings.url)  # mongodb://localhost:27017/files_manager

"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from files_manager_lib.exceptions import StoreConfigurationError

ENVIRONMENT_VARIABLE = "FILES_MANAGER_ENV"


def get_env_file(environment: str | None = None) -> Path:
    """
    Resolve the dotenv file for an environment name.

    Args:
    ----
        environment: Environment name. Defaults to $FILES_MANAGER_ENV, then "dev".

    Returns:
    -------
        Path to ``.env.test`` for test/coverage runs, ``.env`` otherwise
        (relative to the current working directory)

    """
    if environment is None:
        environment = os.environ.get(ENVIRONMENT_VARIABLE, "dev")

    if "test" in environment or "cover" in environment:
        return Path(".env.test")
    return Path(".env")


class DocumentStoreSettings(BaseSettings):
    """MongoDB connection settings read from DB_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "localhost"
    port: int = 27017
    database: str = "files_manager"

    @property
    def url(self) -> str:
        """Connection string with the database as the default auth/target database."""
        return f"mongodb://{self.host}:{self.port}/{self.database}"


class KeyValueStoreConfig(BaseModel):
    """Redis connection settings (driver defaults, no environment overrides)."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="localhost", description="Redis host")
    port: int = Field(default=6379, description="Redis port")
    db: int = Field(default=0, description="Redis logical database index")


def load_document_store_settings(environment: str | None = None) -> DocumentStoreSettings:
    """
    Load document store settings from the environment and the matching dotenv file.

    Args:
    ----
        environment: Environment name used to pick the dotenv file (see get_env_file)

    Returns:
    -------
        Parsed DocumentStoreSettings

    Raises:
    ------
        StoreConfigurationError: If a variable cannot be parsed (e.g. DB_PORT=abc)

    """
    env_file = get_env_file(environment)
    try:
        return DocumentStoreSettings(_env_file=env_file)
    except ValidationError as e:
        raise StoreConfigurationError(f"Invalid document store settings (env file: {env_file}): {e}") from e
