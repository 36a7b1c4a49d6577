"""Custom exceptions for credential resolution."""


class CredentialError(Exception):
    """No GitHub token could be found in any credential source."""
