from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlsplit

import requests

from ai.stream import StreamAccumulator, StreamState, TranslationError
from core.logger import get_logger
from core.prompt_builder import create_translation_prompt
from core.validator import Translations, validate_translations

logger = get_logger(__name__)

DEFAULT_API_URL = "http://localhost:11434/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"

__all__ = ["LLMClient", "TranslationError", "resolve_endpoint", "DEFAULT_API_URL", "DEFAULT_MODEL"]


def resolve_endpoint(url: str) -> Tuple[str, str, int, str]:
    """
    Splits an API URL into (scheme, host, port, path) for logging.
    The port defaults to 443 for https and 80 otherwise; requests picks
    the transport from the same scheme.
    """
    parts = urlsplit(url)
    scheme = parts.scheme or "http"
    is_https = scheme == "https"
    host = parts.hostname or "localhost"
    port = parts.port or (443 if is_https else 80)
    path = parts.path or "/"
    return scheme, host, port, path


class LLMClient:
    """
    Streaming client for an OpenAI compatible chat-completions endpoint.
    One request per call, no retries and no client-side timeout.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL, api_key: Optional[str] = None, model: str = DEFAULT_MODEL):
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.state = StreamState.CONNECTING

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "stream": True,
            "messages": [{"role": "user", "content": prompt}],
        }

    def build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def stream_completion(self, prompt: str) -> Any:
        """
        Sends the prompt and assembles the streamed answer into one JSON value.

        Raises:
            TranslationError: transport failure, non-2xx status or a final
                text that is not valid JSON.
        """
        scheme, host, port, path = resolve_endpoint(self.api_url)
        logger.debug(f"POST {scheme}://{host}:{port}{path} model={self.model}")

        accumulator = StreamAccumulator()
        self.state = accumulator.state

        try:
            response = requests.post(
                self.api_url,
                json=self.build_payload(prompt),
                headers=self.build_headers(),
                stream=True,
            )
        except requests.RequestException as e:
            self.state = StreamState.FAILED
            raise TranslationError(f"Request to {self.api_url} failed: {e}") from e

        try:
            if not 200 <= response.status_code < 300:
                accumulator.fail()
                raise TranslationError(f"Server returned {response.status_code}: {response.text[:200]}")

            try:
                # Chunks are handled as received, lines are not joined across them
                for chunk in response.iter_content(chunk_size=None):
                    if not chunk:
                        continue
                    accumulator.feed(chunk.decode("utf-8", errors="replace"))
            except requests.RequestException as e:
                accumulator.fail()
                raise TranslationError(f"Stream from {self.api_url} interrupted: {e}") from e

            if accumulator.skipped_events:
                logger.debug(f"Skipped {accumulator.skipped_events} malformed event(s)")
            return accumulator.finalize()
        finally:
            self.state = accumulator.state
            response.close()

    def translate(self, diff: Translations, target_lang: str, reasoning: bool = False) -> Translations:
        """Translates the values of `diff` into `target_lang`."""
        prompt = create_translation_prompt(diff, target_lang, reasoning)
        result = self.stream_completion(prompt)

        if not validate_translations(result):
            raise TranslationError(
                f"Model output for {target_lang} is not a flat JSON object of strings: {str(result)[:100]}"
            )
        return result
