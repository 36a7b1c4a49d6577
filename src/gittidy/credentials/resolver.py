"""CredentialResolver - Locates a GitHub token the way the gh CLI stores it."""

from __future__ import annotations

import base64
import logging
import os
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import keyring
import yaml
from keyring.errors import KeyringError

from gittidy.credentials.exceptions import CredentialError

logger = logging.getLogger("gittidy.credentials")

# Checked in order; the first is the gh CLI's own variable
TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
CONFIG_DIR_ENV_VAR = "GH_CONFIG_DIR"
HOSTS_FILE = "hosts.yml"
KEYRING_SERVICE = "gh:github.com"
KEYRING_USERNAME = ""

# gh writes through go-keyring, which encodes secrets on macOS
GO_KEYRING_BASE64_PREFIX = "go-keyring-base64:"
GO_KEYRING_HEX_PREFIX = "go-keyring-encoded:"

TokenSource = Callable[[], str | None]


def decode_go_keyring_secret(secret: str) -> str:
    """Undo go-keyring's base64 or hex encoding of a stored secret.

    Secrets without a known prefix are returned unchanged.

    Raises:
        ValueError: If the prefixed payload does not decode
    """
    try:
        if secret.startswith(GO_KEYRING_BASE64_PREFIX):
            payload = secret[len(GO_KEYRING_BASE64_PREFIX) :]
            return base64.b64decode(payload, validate=True).decode("utf-8")
        if secret.startswith(GO_KEYRING_HEX_PREFIX):
            return bytes.fromhex(secret[len(GO_KEYRING_HEX_PREFIX) :]).decode("utf-8")
    except ValueError as e:
        raise ValueError(f"Undecodable go-keyring secret: {e}") from e
    return secret


def default_config_dir(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> Path:
    """Return the gh CLI configuration directory.

    Args:
        environ: Environment to read (defaults to os.environ)
        platform: Platform name as in sys.platform (defaults to the current one)

    Returns:
        GH_CONFIG_DIR if set, otherwise the platform default
    """
    env = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    override = env.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    if platform.startswith("win"):
        return Path(env.get("APPDATA", "")) / "GitHub CLI"
    xdg_config = env.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "gh"
    return Path.home() / ".config" / "gh"


class CredentialResolver:
    """Resolves a GitHub token from the first source that yields one.

    Sources, in priority order:
    - GH_TOKEN, then GITHUB_TOKEN
    - the `oauth_token` field for the host in gh's hosts.yml
    - the platform keyring entry written by gh
    """

    def __init__(
        self,
        host: str = "github.com",
        environ: Mapping[str, str] | None = None,
        config_dir: str | Path | None = None,
        keyring_backend: Any = None,
        platform: str | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            host: Host whose credentials are wanted
            environ: Environment to read (defaults to os.environ)
            config_dir: gh config directory (defaults to default_config_dir())
            keyring_backend: Object with a keyring-style get_password()
                (defaults to the keyring module)
            platform: Platform name as in sys.platform (defaults to the current one)
        """
        self.host = host
        self.environ = os.environ if environ is None else environ
        self.config_dir = Path(config_dir) if config_dir is not None else None
        self.keyring = keyring if keyring_backend is None else keyring_backend
        self.platform = sys.platform if platform is None else platform

    @property
    def hosts_file(self) -> Path:
        """Path of gh's hosts.yml."""
        config_dir = self.config_dir or default_config_dir(self.environ, self.platform)
        return config_dir / HOSTS_FILE

    def sources(self) -> list[tuple[str, TokenSource]]:
        """Ordered credential sources as (name, lookup) pairs."""
        sources: list[tuple[str, TokenSource]] = [
            (name, lambda name=name: self._from_env(name)) for name in TOKEN_ENV_VARS
        ]
        sources.append((str(self.hosts_file), self._from_hosts_file))
        sources.append((f"keyring ({self.keyring_service})", self._from_keyring))
        return sources

    def resolve(self) -> str:
        """Return the first non-empty token.

        Returns:
            The token

        Raises:
            CredentialError: If no source yields a token
        """
        tried = []
        for source, lookup in self.sources():
            token = lookup()
            if token:
                logger.debug("Using GitHub token from %s", source)
                return token
            tried.append(source)
        raise CredentialError(
            "No GitHub token found (tried: " + ", ".join(tried) + "). "
            "Set GH_TOKEN or run `gh auth login`."
        )

    def _from_env(self, name: str) -> str | None:
        value = self.environ.get(name, "").strip()
        return value or None

    def _from_hosts_file(self) -> str | None:
        """Read the inline oauth_token for the host from hosts.yml."""
        path = self.hosts_file
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("gh config file %s not found", path)
            return None
        except OSError as e:
            logger.warning("Could not read gh config file %s: %s", path, e)
            return None

        try:
            hosts = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.warning("Could not parse gh config file %s: %s", path, e)
            return None

        if not isinstance(hosts, dict):
            if hosts is not None:
                logger.warning("Unexpected content in gh config file %s", path)
            return None

        record = hosts.get(self.host)
        if not isinstance(record, dict):
            return None
        token = record.get("oauth_token")
        if not isinstance(token, str):
            return None
        return token.strip() or None

    @property
    def keyring_service(self) -> str:
        """Service name gh's keyring entry is stored under on this platform."""
        if self.platform.startswith("win"):
            # go-keyring's wincred target is "service:username"
            return f"{KEYRING_SERVICE}:{KEYRING_USERNAME}"
        return KEYRING_SERVICE

    def _from_keyring(self) -> str | None:
        """Read the token gh stored in the platform keyring."""
        try:
            token = self.keyring.get_password(self.keyring_service, KEYRING_USERNAME)
        except KeyringError as e:
            logger.debug("Keyring lookup failed: %s", e)
            return None
        if not token:
            return None

        if self.platform.startswith("win") and not token.isascii():
            # go-keyring writes a UTF-8 blob; keyring reads it back as UTF-16
            try:
                token = token.encode("utf-16-le").decode("utf-8")
            except UnicodeError:
                logger.warning("Keyring entry %s is not a readable token", self.keyring_service)
                return None

        try:
            token = decode_go_keyring_secret(token)
        except ValueError as e:
            logger.warning("Keyring entry %s could not be decoded: %s", self.keyring_service, e)
            return None
        return token.strip() or None
