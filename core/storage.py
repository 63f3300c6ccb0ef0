import os
import json
import shutil
import tempfile
from core.logger import get_logger
from core.validator import Translations, InvalidTranslationsError, validate_translations

logger = get_logger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def load_translations(path: str) -> Translations:
    """
    Reads a translations file. Errors propagate to the caller:
    OSError when unreadable, json.JSONDecodeError when not JSON and
    InvalidTranslationsError when not a flat string mapping.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not validate_translations(data):
        raise InvalidTranslationsError(f"{path} is not a flat JSON object of string values")
    return data


def load_existing_translations(path: str) -> Translations:
    """
    Reads a previously written output file. A missing file is an empty
    mapping; so is an unreadable one, with a warning.
    """
    if not os.path.exists(path):
        return {}

    try:
        return load_translations(path)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {path}, continuing with empty translation. ({e})")
        return {}


def save_translations(path: str, data: Translations):
    """
    Atomically writes a translations file as 2-space indented UTF-8 JSON.
    The parent directory is created when missing.
    """
    dir_name = os.path.dirname(path) or "."
    os.makedirs(dir_name, exist_ok=True)

    # Write to temp -> Rename
    with tempfile.NamedTemporaryFile(mode='w', dir=dir_name, delete=False, encoding='utf-8', suffix=".tmp") as tf:
        temp_name = tf.name
        try:
            json.dump(data, tf, indent=2, ensure_ascii=False)
        except Exception:
            tf.close()
            os.remove(temp_name)
            raise

    try:
        # Temp files are created 0600; keep the target's mode, else follow the umask
        if os.path.exists(path):
            shutil.copymode(path, temp_name)
        else:
            os.chmod(temp_name, 0o666 & ~_current_umask())
        os.replace(temp_name, path)
    except OSError:
        os.remove(temp_name)
        raise
    logger.debug(f"Wrote {len(data)} keys to {path}")
