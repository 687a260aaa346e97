import asyncio
import logging
import time
from typing import Optional

import deepl
import langcodes

from common.config import DEEPL_AUTH_KEY
from core.versions import TRANSLATION_ENGINE_VERSION

SOURCE_LANG = "EN"
RETRY_WAIT_SECONDS = 3

# DeepL only accepts regional variants for these target languages.
REGIONAL_TARGETS = {"EN": "US", "PT": "BR"}


def to_deepl_target(language_code: str) -> str:
    """
    BCP 47 tag -> DeepL target code: "de" -> "DE", "en-gb" -> "EN-GB", "pt" -> "PT-BR".
    Raises ValueError for tags langcodes cannot parse.
    """
    lang = langcodes.Language.get(language_code.strip())
    if not lang.language:
        raise ValueError(f"Unsupported target language: {language_code!r}")

    base = lang.language.upper()
    if base in REGIONAL_TARGETS:
        region = (lang.territory or REGIONAL_TARGETS[base]).upper()
        return f"{base}-{region}"
    return base


class DeepLTranslator:
    """
    Translates English example sentences with DeepL.
    Instances are awaitable callables matching TranslateFn.
    """

    version = TRANSLATION_ENGINE_VERSION

    def __init__(self, auth_key: Optional[str] = None, client: Optional[deepl.Translator] = None):
        self.translator = client or deepl.Translator(auth_key or DEEPL_AUTH_KEY)

    def translate_sync(self, text: str, target_language_code: str) -> str:
        target_lang = to_deepl_target(target_language_code)

        for attempt in range(2):
            try:
                result = self.translator.translate_text(
                    text, target_lang=target_lang, source_lang=SOURCE_LANG
                )
                break
            except deepl.TooManyRequestsException:
                if attempt == 1:
                    raise
                logging.warning(f"Too many requests to DeepL, waiting {RETRY_WAIT_SECONDS}s...")
                time.sleep(RETRY_WAIT_SECONDS)

        if isinstance(result, list):
            result = result[0]
        return result.text

    async def translate(self, text: str, target_language_code: str) -> str:
        return await asyncio.to_thread(self.translate_sync, text, target_language_code)

    async def __call__(self, text: str, target_language_code: str) -> str:
        return await self.translate(text, target_language_code)
