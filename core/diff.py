from core.logger import get_logger
from core.validator import Translations

logger = get_logger(__name__)


def get_translation_diff(source: Translations, existing: Translations) -> Translations:
    """
    Compare source and existing translations to find missing keys.

    Only key presence matters: a key already in `existing` is never
    returned, whatever its value.
    """
    return {key: value for key, value in source.items() if key not in existing}


def merge_translations(existing: Translations, diff: Translations, translated: Translations) -> Translations:
    """
    Applies the model output for the diffed keys on top of the existing mapping.
    Keys outside the diff are kept from `existing` untouched.
    """
    merged = dict(existing)
    missing = []
    for key in diff:
        if key in translated:
            merged[key] = translated[key]
        else:
            missing.append(key)

    if missing:
        logger.warning(f"Model omitted {len(missing)} key(s), they stay untranslated: {', '.join(missing)}")

    extra = [key for key in translated if key not in diff]
    if extra:
        logger.debug(f"Ignoring {len(extra)} key(s) not requested for translation: {extra}")

    return merged
