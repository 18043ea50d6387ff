import logging
import threading
from typing import List, Optional

from app.config import DICTIONARY_DIR
from app.lib.error_messages import ErrorMessages
from app.services.translator.dictionaries import load_dictionaries
from app.services.translator.dictionary_inverter import invert_dictionary
from app.services.translator.span_compositor import compose, deduplicate_spans
from app.services.translator.span_matcher import (
    compile_terms,
    compile_titles,
    match_terms,
    match_times,
    match_titles,
)
from app.services.translator.translator_types import (
    DictionaryConfig,
    MatchSpan,
    TranslationDirection,
    TranslationError,
    TranslationResult,
    TranslationSuccess,
)

logger = logging.getLogger(__name__)


class Translator:
    """
    Translates text between American and British English.

    Dictionaries are injected at construction. The British to American spelling and title
    dictionaries are derived from them and every pattern is compiled once, so a Translator
    can be shared freely.
    """

    def __init__(self, dictionaries: DictionaryConfig):
        self.dictionaries = dictionaries
        self.british_to_american_spelling = invert_dictionary(dictionaries.american_to_british_spelling)
        self.british_to_american_titles = invert_dictionary(dictionaries.american_to_british_titles)

        # terms, spelling and titles per direction, in precedence order
        self.patterns = {
            TranslationDirection.AMERICAN_TO_BRITISH: (
                compile_terms(dictionaries.american_only),
                compile_terms(dictionaries.american_to_british_spelling),
                compile_titles(dictionaries.american_to_british_titles),
            ),
            TranslationDirection.BRITISH_TO_AMERICAN: (
                compile_terms(dictionaries.british_only),
                compile_terms(self.british_to_american_spelling),
                compile_titles(self.british_to_american_titles),
            ),
        }

    def validate(self, text: Optional[str], locale: Optional[str]) -> Optional[TranslationError]:
        if text is None:
            return TranslationError(error=ErrorMessages.REQUIRED_FIELDS_MISSING)
        if text == "":
            return TranslationError(error=ErrorMessages.NO_TEXT_TO_TRANSLATE)
        if not locale:
            return TranslationError(error=ErrorMessages.REQUIRED_FIELDS_MISSING)
        if locale not in {direction.value for direction in TranslationDirection}:
            return TranslationError(error=ErrorMessages.INVALID_LOCALE)
        return None

    def find_spans(self, text: str, direction: TranslationDirection) -> List[MatchSpan]:
        """Collect spans in precedence order: terms, spelling, titles, then times."""
        terms, spelling, titles = self.patterns[direction]
        return [
            *match_terms(text, terms),
            *match_terms(text, spelling),
            *match_titles(text, titles),
            *match_times(text, direction),
        ]

    def translate(self, text: Optional[str], locale: Optional[str]) -> TranslationResult:
        error = self.validate(text, locale)
        if error:
            logger.info("Rejected translation request: %s", error.error)
            return error

        direction = TranslationDirection(locale)
        spans = deduplicate_spans(self.find_spans(text, direction))
        logger.debug("Found %s spans for %s", len(spans), direction.value)

        if not spans:
            return TranslationSuccess(text=text, translation=ErrorMessages.NOTHING_TO_TRANSLATE)

        return TranslationSuccess(text=text, translation=compose(text, spans))


_default_translator: Optional[Translator] = None
_default_translator_lock = threading.Lock()


def get_translator() -> Translator:
    """Return the process-wide Translator, loading DICTIONARY_DIR on first use."""
    global _default_translator
    with _default_translator_lock:
        if _default_translator is None:
            _default_translator = Translator(load_dictionaries(DICTIONARY_DIR))
    return _default_translator
