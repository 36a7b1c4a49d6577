"""Credentials - Resolve the GitHub token used for API calls."""

from gittidy.credentials.exceptions import CredentialError
from gittidy.credentials.resolver import (
    CONFIG_DIR_ENV_VAR,
    GO_KEYRING_BASE64_PREFIX,
    GO_KEYRING_HEX_PREFIX,
    HOSTS_FILE,
    KEYRING_SERVICE,
    KEYRING_USERNAME,
    TOKEN_ENV_VARS,
    CredentialResolver,
    decode_go_keyring_secret,
    default_config_dir,
)

__all__ = [
    "CONFIG_DIR_ENV_VAR",
    "GO_KEYRING_BASE64_PREFIX",
    "GO_KEYRING_HEX_PREFIX",
    "HOSTS_FILE",
    "KEYRING_SERVICE",
    "KEYRING_USERNAME",
    "TOKEN_ENV_VARS",
    "CredentialError",
    "CredentialResolver",
    "decode_go_keyring_secret",
    "default_config_dir",
]
