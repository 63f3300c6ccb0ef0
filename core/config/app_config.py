import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from ai.client import DEFAULT_API_URL, DEFAULT_MODEL
from core.args import get_arg, get_all_args
from core.settings_manager import KeyringManager

DEFAULT_OUT_DIR = "."

USAGE = (
    "Usage: translate-i18n en.json --to nl --to fr "
    "[--apiUrl URL] [--apiKey KEY] [--model NAME] [--reasoning true] [--outDir ./dir]"
)


@dataclass
class AppConfig:
    """
    Run configuration.
    Flags win over environment variables (LLM_API_URL, LLM_API_KEY, LLM_MODEL),
    which win over the defaults. A key stored in the system keyring is used
    when neither flag nor environment provides one.
    """
    source_file: Optional[str] = None
    target_langs: List[str] = field(default_factory=list)
    api_url: str = DEFAULT_API_URL
    api_key: str = ""
    model: str = DEFAULT_MODEL
    reasoning: bool = False
    out_dir: str = DEFAULT_OUT_DIR

    @classmethod
    def from_argv(cls, argv: List[str], environ: Optional[Mapping[str, str]] = None,
                  keyring_manager: Optional[KeyringManager] = None) -> "AppConfig":
        environ = os.environ if environ is None else environ
        source_file = argv[0] if argv else None
        rest = argv[1:]

        api_url = get_arg(rest, "--apiUrl") or environ.get("LLM_API_URL") or DEFAULT_API_URL
        api_key = get_arg(rest, "--apiKey") or environ.get("LLM_API_KEY") or ""

        config = cls(
            source_file=source_file or None,
            target_langs=get_all_args(rest, "--to"),
            api_url=api_url,
            api_key=api_key,
            model=get_arg(rest, "--model") or environ.get("LLM_MODEL") or DEFAULT_MODEL,
            reasoning=get_arg(rest, "--reasoning") == "true",
            out_dir=get_arg(rest, "--outDir") or DEFAULT_OUT_DIR,
        )

        # Keyring lookup only matters once the run can actually go ahead
        if not config.api_key and config.is_complete():
            manager = keyring_manager or KeyringManager()
            config.api_key = manager.get_api_key(config.api_url) or ""

        return config

    def is_complete(self) -> bool:
        return bool(self.source_file) and len(self.target_langs) > 0
