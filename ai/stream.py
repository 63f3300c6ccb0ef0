"""
Accumulates a streamed chat completion (server-sent events) into one JSON document.

Each event carries a small text fragment; only the concatenation of all
fragments is expected to be valid JSON, so the buffer is parsed once the
response has ended.
"""
import json
from enum import Enum
from typing import Any, List

from core.logger import get_logger

logger = get_logger(__name__)

EVENT_PREFIX = "data:"
DONE_MARKER = "[DONE]"


class TranslationError(Exception):
    """Translating one language failed (transport, HTTP status or model output)."""


class StreamState(Enum):
    CONNECTING = "connecting"
    STREAMING = "streaming"
    DONE = "done"
    FAILED = "failed"


def extract_delta(event: Any) -> str:
    """
    Returns the text carried by one completion event: the streaming delta
    content, or the full message content for servers that send whole messages.
    """
    if not isinstance(event, dict):
        return ""
    choices = event.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    choice = choices[0]

    for field in ("delta", "message"):
        part = choice.get(field)
        if isinstance(part, dict):
            content = part.get("content")
            if content and isinstance(content, str):
                return content
    return ""


class StreamAccumulator:
    def __init__(self):
        self.state = StreamState.CONNECTING
        self.fragments: List[str] = []
        self.skipped_events = 0

    @property
    def text(self) -> str:
        return "".join(self.fragments)

    def feed(self, chunk: str):
        """Consume one chunk of the response body."""
        if self.state in (StreamState.DONE, StreamState.FAILED):
            raise RuntimeError(f"Cannot feed a stream in state {self.state.value}")
        self.state = StreamState.STREAMING

        for line in chunk.split("\n"):
            trimmed = line.strip()
            if not trimmed.startswith(EVENT_PREFIX):
                continue

            payload = trimmed[len(EVENT_PREFIX):].lstrip()
            # Rest of this chunk is ignored; later chunks are still read
            if payload == DONE_MARKER:
                return

            try:
                event = json.loads(payload)
            except json.JSONDecodeError:
                self.skipped_events += 1
                logger.warning(f"Could not parse chunk: {payload}")
                continue

            delta = extract_delta(event)
            if delta:
                self.fragments.append(delta)

    def fail(self):
        self.state = StreamState.FAILED

    def finalize(self) -> Any:
        """Parse the accumulated text once the response has ended."""
        try:
            result = json.loads(self.text)
        except json.JSONDecodeError as e:
            self.state = StreamState.FAILED
            raise TranslationError(f"Failed to parse final JSON from model: {e}") from e

        self.state = StreamState.DONE
        return result
