from .dictionaries import load_dictionaries
from .dictionary_exception import DictionaryError, DictionaryErrorCode
from .dictionary_inverter import invert_dictionary
from .span_compositor import compose, deduplicate_spans, highlight
from .span_matcher import compile_terms, compile_titles, match_terms, match_times, match_titles
from .translator import Translator, get_translator
from .translator_types import (
    DictionaryConfig,
    MatchSpan,
    TranslationDirection,
    TranslationError,
    TranslationResult,
    TranslationSuccess,
)

__all__ = [
    "DictionaryConfig",
    "DictionaryError",
    "DictionaryErrorCode",
    "MatchSpan",
    "TranslationDirection",
    "TranslationError",
    "TranslationResult",
    "TranslationSuccess",
    "Translator",
    "compile_terms",
    "compile_titles",
    "compose",
    "deduplicate_spans",
    "get_translator",
    "highlight",
    "invert_dictionary",
    "load_dictionaries",
    "match_terms",
    "match_times",
    "match_titles",
]
