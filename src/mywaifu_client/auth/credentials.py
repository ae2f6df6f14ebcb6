"""API key resolution.

Resolution order (first match wins):
1. Explicitly provided value
2. ``MYWAIFULIST_API_KEY`` environment variable (``.env`` is loaded first via python-dotenv)
3. File whose path is in ``MYWAIFULIST_API_KEY_FILE``

Keys are never logged; only the source they came from.

Example:
    ```python
    from mywaifu_client.auth import ApiKeyResolver

    api_key = ApiKeyResolver().resolve()
    ```
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from mywaifu_client.auth.exceptions import CredentialFileError, MissingApiKeyError

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "MYWAIFULIST_API_KEY"
API_KEY_FILE_ENV_VAR = "MYWAIFULIST_API_KEY_FILE"


class ApiKeyResolver:
    """Resolve the MyWaifuList API key from the configured sources.

    Args:
        env_var_name: Environment variable holding the key.
        file_env_var_name: Environment variable holding a path to a key file.
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load the .env file before reading the environment.
    """

    def __init__(
        self,
        *,
        env_var_name: str = API_KEY_ENV_VAR,
        file_env_var_name: str = API_KEY_FILE_ENV_VAR,
        dotenv_path: str | Path | None = None,
        load_dotenv: bool = True,
    ):
        self.env_var_name = env_var_name
        self.file_env_var_name = file_env_var_name
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()

    def _ensure_dotenv_loaded(self) -> None:
        if not self._load_dotenv_enabled or self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            # Existing environment variables win over .env entries
            load_dotenv(dotenv_path=self._dotenv_path, override=False)
            self._dotenv_loaded = True
            logger.debug("Loaded .env file for API key resolution")

    def resolve(self, value: str | None = None) -> str:
        """Return the API key from the first source that has one.

        Args:
            value: Explicit key; takes priority over every other source.

        Returns:
            The API key, stripped of surrounding whitespace.

        Raises:
            MissingApiKeyError: If no source provides a key.
            CredentialFileError: If the key file is configured but unreadable.
        """
        if value is not None and value.strip():
            logger.debug("Using API key from explicit parameter (***)")
            return value.strip()

        self._ensure_dotenv_loaded()

        from_env = os.environ.get(self.env_var_name, "").strip()
        if from_env:
            logger.debug(f"Using API key from environment variable '{self.env_var_name}' (***)")
            return from_env

        key_file = os.environ.get(self.file_env_var_name, "").strip()
        if key_file:
            return self.resolve_from_file(key_file)

        raise MissingApiKeyError(
            f"No API key found (checked env vars: {self.env_var_name}, {self.file_env_var_name})",
            env_var_name=self.env_var_name,
        )

    def resolve_from_file(self, file_path: str | Path) -> str:
        """Read the API key from a file.

        Supports ``~`` and ``$VAR`` expansion. Surrounding whitespace is stripped.

        Raises:
            CredentialFileError: If the file is missing, unreadable or empty.
        """
        path = Path(os.path.expanduser(os.path.expandvars(str(file_path))))

        try:
            content = path.read_text().strip()
        except FileNotFoundError:
            raise CredentialFileError(f"API key file not found: {path}", file_path=path) from None
        except PermissionError:
            raise CredentialFileError(f"Permission denied reading API key file: {path}", file_path=path) from None
        except OSError as e:
            raise CredentialFileError(f"Error reading API key file {path}: {e}", file_path=path) from e

        if not content:
            raise CredentialFileError(f"API key file is empty: {path}", file_path=path)

        logger.debug(f"Using API key from file: {path} (***)")
        return content
