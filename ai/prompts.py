NO_THINK_DIRECTIVE = "/no-think"

TRANSLATION_INSTRUCTION_TEMPLATE = (
    "\n"
    "    [no prose]\n"
    "    [Output only JSON]\n"
    "    You are a translation assistant. Translate only the values in the following JSON object "
    "from English to {target_lang}. Keep the keys and structure identical. Return valid JSON only. "
    "DO NOT PERFORM FORMATTING, PROVIDE RAW JSON TEXT ONLY"
)

TRANSLATION_PROMPT_TEMPLATE = "{instruction}\n\n{data_str}"
