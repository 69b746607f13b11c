# =============================================================================
# agriscan_core/services/translation_service.py
# Offline English -> Filipino Word Translator
# =============================================================================

from __future__ import annotations
import re
import time
from typing import Callable, Dict, List, Optional

from .base_service import BaseService, ServiceResult
from agriscan_core.offline import LocalStorage, RECENT_TRANSLATIONS_KEY

MAX_INPUT_LENGTH = 500
MAX_RECENT = 5
TRANSLATE_DELAY = 0.5  # seconds

_NON_WORD = re.compile(r"[^\w]")
_WHITESPACE = re.compile(r"\s+")

COMMON_PHRASES: List[Dict[str, str]] = [
    {"english": "rice disease", "filipino": "sakit ng bigas"},
    {"english": "pest control", "filipino": "kontrol sa peste"},
    {"english": "plant symptoms", "filipino": "sintomas ng halaman"},
    {"english": "treatment solution", "filipino": "solusyon sa gamot"},
    {"english": "healthy plant", "filipino": "malusog na halaman"},
    {"english": "damaged leaf", "filipino": "nasirang dahon"},
]


def translate_words(text: str, dictionary: Dict[str, str]) -> str:
    """
    Word-by-word lookup.

    The text is lower-cased and split on whitespace. Each word is looked up
    with punctuation stripped, and the translation replaces the bare word
    inside the original token so surrounding punctuation survives. Unknown
    words pass through unchanged.
    """
    translated = []
    for word in _WHITESPACE.split(text.lower()):
        clean = _NON_WORD.sub("", word)
        translation = dictionary.get(clean) if clean else None
        translated.append(word.replace(clean, translation, 1) if translation else word)
    return " ".join(translated)


class TranslationService(BaseService):
    """
    Translator backed by the bundled dictionary; works offline.

    The last five translations are kept in local storage under
    ``recentTranslations``, newest first.
    """

    def __init__(
        self,
        dictionary: Dict[str, str],
        storage: LocalStorage,
        sleep: Callable[[float], None] = time.sleep,
        delay: float = TRANSLATE_DELAY,
    ):
        super().__init__()
        self.dictionary = {k.lower(): v for k, v in dictionary.items()}
        self.storage = storage
        self._sleep = sleep
        self._delay = delay

    @property
    def term_count(self) -> int:
        return len(self.dictionary)

    def recent_translations(self) -> List[Dict[str, str]]:
        saved = self.storage.get_json(RECENT_TRANSLATIONS_KEY, default=[])
        return saved if isinstance(saved, list) else []

    def translate(self, text: str) -> ServiceResult:
        """
        Translate ``text`` and remember it.

        Returns:
            ServiceResult with {"english", "filipino"}, or ok(None) for blank input
        """
        if not text or not text.strip():
            return ServiceResult.ok(None)

        text = text[:MAX_INPUT_LENGTH]

        def _translate():
            self._sleep(self._delay)
            result = translate_words(text, self.dictionary)
            entry = {"english": text, "filipino": result}
            recent = [entry] + self.recent_translations()[:MAX_RECENT - 1]
            self.storage.set_json(RECENT_TRANSLATIONS_KEY, recent)
            return entry

        result = self.safe_execute("Translating text", _translate)
        if not result:
            return ServiceResult.fail(
                "Translation error occurred. Please try again.",
                error_code=result.error_code or "TRANSLATE_001",
            )
        return result

    def clear_recent(self) -> None:
        self.storage.remove_item(RECENT_TRANSLATIONS_KEY)

    @staticmethod
    def common_phrases() -> List[Dict[str, str]]:
        return [dict(p) for p in COMMON_PHRASES]

    def lookup(self, word: str) -> Optional[str]:
        return self.dictionary.get(_NON_WORD.sub("", word.lower()))
