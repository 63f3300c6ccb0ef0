from typing import Optional
from urllib.parse import urlsplit

import keyring

from core.logger import get_logger

logger = get_logger(__name__)

APP_NAME = "i18n_translator"

# Local model servers run without keys
LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


class KeyringManager:
    """
    Looks up API keys stored in the system keyring.
    Keys are stored per API host, e.g.:

        keyring set i18n_translator api.openai.com
    """

    def __init__(self, service: str = APP_NAME):
        self.service = service

    @staticmethod
    def account_for(api_url: str) -> str:
        return urlsplit(api_url).hostname or "localhost"

    def get_api_key(self, api_url: str) -> Optional[str]:
        account = self.account_for(api_url)
        if account in LOCAL_HOSTS:
            return None
        try:
            return keyring.get_password(self.service, account)
        except Exception as e:
            # Headless environments often have no usable backend (e.g. no D-Bus session)
            logger.warning(f"System keyring not available: {e}. Continuing without stored API key.")
            return None
