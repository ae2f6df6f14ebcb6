"""Exceptions for API key resolution.

Example:
    ```python
    from mywaifu_client.auth.exceptions import MissingApiKeyError

    try:
        client = MyWaifuClient.from_env()
    except MissingApiKeyError as e:
        print(f"Set {e.env_var_name} first")
    ```
"""

from pathlib import Path


class CredentialError(Exception):
    """Base exception for API key resolution errors."""

    pass


class MissingApiKeyError(CredentialError):
    """Raised when no source provides an API key.

    Attributes:
        env_var_name: The environment variable that was checked.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when the configured API key file cannot be used."""

    def __init__(self, message: str, file_path: Path | None = None):
        super().__init__(message)
        self.file_path = file_path
