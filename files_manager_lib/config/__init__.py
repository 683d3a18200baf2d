"""files-manager-lib configuration management."""

from files_manager_lib.config.settings import (
    ENVIRONMENT_VARIABLE,
    DocumentStoreSettings,
    KeyValueStoreConfig,
    get_env_file,
    load_document_store_settings,
)

__all__ = [
    "ENVIRONMENT_VARIABLE",
    "DocumentStoreSettings",
    "KeyValueStoreConfig",
    "get_env_file",
    "load_document_store_settings",
]
