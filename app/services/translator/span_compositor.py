import logging
from typing import Iterable, List, Tuple

from app.services.translator.translator_types import MatchSpan

logger = logging.getLogger(__name__)

HIGHLIGHT_START = '<span class="highlight">'
HIGHLIGHT_END = "</span>"


def highlight(replacement: str) -> str:
    return f"{HIGHLIGHT_START}{replacement}{HIGHLIGHT_END}"


def deduplicate_spans(spans: Iterable[MatchSpan]) -> List[MatchSpan]:
    """Keep the first span seen for each (start, end) range."""
    seen = set()
    unique = []
    for span in spans:
        if span.key in seen:
            continue
        seen.add(span.key)
        unique.append(span)
    return unique


def find_overlaps(spans: List[MatchSpan]) -> List[Tuple[MatchSpan, MatchSpan]]:
    ordered = sorted(spans, key=lambda span: (span.start, span.end))
    overlaps = []
    for index, span in enumerate(ordered):
        for following in ordered[index + 1 :]:
            if following.start >= span.end:
                break
            overlaps.append((span, following))
    return overlaps


def compose(text: str, spans: List[MatchSpan]) -> str:
    """
    Replace every span with its highlighted replacement.

    Spans are applied from the rightmost start offset to the leftmost, so each edit only
    shifts text that has already been processed. Partially overlapping spans are not
    resolved and will corrupt the output; they are logged so bad dictionary content
    can be found.
    """
    for first, second in find_overlaps(spans):
        logger.warning(
            "Overlapping translation spans [%s, %s) %r and [%s, %s) %r",
            first.start,
            first.end,
            first.original,
            second.start,
            second.end,
            second.original,
        )

    result = text
    for span in sorted(spans, key=lambda span: span.start, reverse=True):
        result = result[: span.start] + highlight(span.replacement) + result[span.end :]
    return result
