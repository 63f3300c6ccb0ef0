import sys
from typing import List, Optional

from ai.client import LLMClient
from core.config.app_config import AppConfig, USAGE
from core.logger import get_logger, setup_exception_hook
from core.storage import load_translations
from core.workers import STATUS_FAILED, TranslationWorker

logger = get_logger("translate_i18n")


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    config = AppConfig.from_argv(argv)
    if not config.is_complete():
        print(USAGE, file=sys.stderr)
        return 1

    # Unreadable source is fatal and left to the exception hook
    source = load_translations(config.source_file)

    logger.info(f"Loaded {config.source_file} with {len(source)} keys")
    logger.info(f"Translating to: {', '.join(config.target_langs)}")
    logger.info(f"Model: ({config.api_url}) {config.model}, Reasoning: {str(config.reasoning).lower()}")
    logger.info(f"Output directory: {config.out_dir}")

    client = LLMClient(api_url=config.api_url, api_key=config.api_key, model=config.model)
    worker = TranslationWorker(source, client, config.target_langs, config.out_dir, config.reasoning)
    results = worker.run()

    failed = [r.language for r in results if r.status == STATUS_FAILED]
    if failed:
        logger.warning(f"Finished with failures for: {', '.join(failed)}")
    return 0


def run():
    """Console script entry point."""
    setup_exception_hook()
    sys.exit(main())


if __name__ == "__main__":
    run()
