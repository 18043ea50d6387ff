import re
from typing import List, Tuple

from app.services.translator.translator_types import DictionaryMapping, MatchSpan, TranslationDirection

AMERICAN_TIME_PATTERN = re.compile(r"\b([0-9]{1,2}):([0-9]{2})\b")
BRITISH_TIME_PATTERN = re.compile(r"\b([0-9]{1,2})\.([0-9]{2})\b")

TIME_FORMATS = {
    TranslationDirection.AMERICAN_TO_BRITISH: (AMERICAN_TIME_PATTERN, "."),
    TranslationDirection.BRITISH_TO_AMERICAN: (BRITISH_TIME_PATTERN, ":"),
}

CompiledMapping = List[Tuple[re.Pattern, str]]


def compile_terms(mapping: DictionaryMapping) -> CompiledMapping:
    return [
        (re.compile(r"\b" + re.escape(source) + r"\b", re.IGNORECASE), target)
        for source, target in mapping.items()
    ]


def compile_titles(mapping: DictionaryMapping) -> CompiledMapping:
    # group 1 captures the first character of the following word
    return [
        (re.compile(r"\b" + re.escape(source) + r"(?=\s(\w))", re.IGNORECASE), target)
        for source, target in mapping.items()
    ]


def match_case(original: str, replacement: str) -> str:
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def match_terms(text: str, patterns: CompiledMapping) -> List[MatchSpan]:
    """Find every whole-word occurrence of each source term, ignoring case."""
    spans = []
    for pattern, target in patterns:
        for match in pattern.finditer(text):
            spans.append(
                MatchSpan(start=match.start(), end=match.end(), original=match.group(0), replacement=target),
            )
    return spans


def match_titles(text: str, patterns: CompiledMapping) -> List[MatchSpan]:
    """
    Find titles followed by a capitalised word, e.g. "Mr. Smith" or "Dr. Émile" but not "mr. smith".

    The replacement is capitalised when the matched title is.
    """
    spans = []
    for pattern, target in patterns:
        for match in pattern.finditer(text):
            if not match.group(1).isupper():
                continue
            original = match.group(0)
            spans.append(
                MatchSpan(
                    start=match.start(),
                    end=match.end(),
                    original=original,
                    replacement=match_case(original, target),
                ),
            )
    return spans


def match_times(text: str, direction: TranslationDirection) -> List[MatchSpan]:
    pattern, separator = TIME_FORMATS[direction]
    return [
        MatchSpan(
            start=match.start(),
            end=match.end(),
            original=match.group(0),
            replacement=f"{match.group(1)}{separator}{match.group(2)}",
        )
        for match in pattern.finditer(text)
    ]
