import os
from dataclasses import dataclass
from typing import List, Optional

from core.diff import get_translation_diff, merge_translations
from core.logger import get_logger
from core.storage import load_existing_translations, save_translations
from core.validator import Translations

logger = get_logger(__name__)

STATUS_UP_TO_DATE = "up_to_date"
STATUS_UPDATED = "updated"
STATUS_FAILED = "failed"


@dataclass
class LanguageResult:
    language: str
    status: str  # 'up_to_date', 'updated', 'failed'
    output_file: str
    translated_keys: int = 0
    error: Optional[str] = None


class TranslationWorker:
    """
    Brings every target language file up to date with the source mapping.
    Languages are processed one after the other; a failure in one of them
    is logged and does not stop the others.
    """

    def __init__(self, source: Translations, client, target_langs: List[str], out_dir: str = ".", reasoning: bool = False):
        self.source = source
        self.client = client
        self.target_langs = target_langs
        self.out_dir = out_dir
        self.reasoning = reasoning

    def output_file(self, lang: str) -> str:
        return os.path.join(self.out_dir, f"{lang}.json")

    def run(self) -> List[LanguageResult]:
        return [self.translate_language(lang) for lang in self.target_langs]

    def translate_language(self, lang: str) -> LanguageResult:
        output_file = self.output_file(lang)
        existing = load_existing_translations(output_file)

        diff = get_translation_diff(self.source, existing)
        if not diff:
            logger.info(f"{lang}.json is up-to-date")
            return LanguageResult(lang, STATUS_UP_TO_DATE, output_file)

        logger.info(f"Translating {len(diff)} new/changed keys for \"{lang}\"...")

        try:
            translated = self.client.translate(diff, lang, reasoning=self.reasoning)
            merged = merge_translations(existing, diff, translated)
            save_translations(output_file, merged)
        except Exception as e:
            logger.error(f"Failed to translate \"{lang}\": {e}")
            logger.debug("Translation failure details", exc_info=True)
            return LanguageResult(lang, STATUS_FAILED, output_file, error=str(e))

        logger.info(f"Updated: {output_file}")
        return LanguageResult(lang, STATUS_UPDATED, output_file, translated_keys=sum(1 for key in diff if key in translated))
