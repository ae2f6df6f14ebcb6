"""API key resolution from explicit values, the environment, .env files and key files."""

from mywaifu_client.auth.credentials import API_KEY_ENV_VAR, API_KEY_FILE_ENV_VAR, ApiKeyResolver
from mywaifu_client.auth.exceptions import CredentialError, CredentialFileError, MissingApiKeyError

__all__ = [
    "API_KEY_ENV_VAR",
    "API_KEY_FILE_ENV_VAR",
    "ApiKeyResolver",
    "CredentialError",
    "CredentialFileError",
    "MissingApiKeyError",
]
