import json
from ai.prompts import NO_THINK_DIRECTIVE, TRANSLATION_INSTRUCTION_TEMPLATE, TRANSLATION_PROMPT_TEMPLATE
from core.validator import Translations


class PromptBuilder:
    """
    Constructs the user prompt sent to the chat-completion model.
    """

    @staticmethod
    def build_instruction(target_lang: str, reasoning: bool = False) -> str:
        """
        Fixed instruction header. Without reasoning it starts with the
        directive local model servers use to skip chain-of-thought.
        """
        instruction = TRANSLATION_INSTRUCTION_TEMPLATE.format(target_lang=target_lang)
        if not reasoning:
            instruction = f"{NO_THINK_DIRECTIVE} {instruction}"
        return instruction

    @staticmethod
    def build_translation_prompt(diff: Translations, target_lang: str, reasoning: bool = False) -> str:
        data_str = json.dumps(diff, ensure_ascii=False, indent=2)
        return TRANSLATION_PROMPT_TEMPLATE.format(
            instruction=PromptBuilder.build_instruction(target_lang, reasoning),
            data_str=data_str,
        )


def create_translation_prompt(diff: Translations, target_lang: str, reasoning: bool = False) -> str:
    """Create a translation prompt for the AI model."""
    return PromptBuilder.build_translation_prompt(diff, target_lang, reasoning)
