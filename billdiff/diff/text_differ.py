"""
Token-level text diff producing tagged spans.

Word, character and line granularities all run Myers' diff from
diff-match-patch. Word and line diffs encode each distinct token as one
code point first, so the character differ sees one "character" per token.

Every result satisfies the round-trip property: joining the EQUAL and
REMOVED spans rebuilds ``left``, joining the EQUAL and ADDED spans
rebuilds ``right``.
"""

import logging
import re
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from diff_match_patch import diff_match_patch

from billdiff.models.section_diff import Span, SpanTag

logger = logging.getLogger(__name__)

# Runs of word characters, runs of whitespace, or one punctuation mark.
# Together these cover every character of the input.
WORD_TOKEN_PATTERN = re.compile(r"\w+|\s+|[^\w\s]")

# One code point per distinct token caps how many tokens can be encoded.
MAX_DISTINCT_TOKENS = sys.maxunicode + 1

_OP_TAGS = {
    diff_match_patch.DIFF_EQUAL: SpanTag.EQUAL,
    diff_match_patch.DIFF_INSERT: SpanTag.ADDED,
    diff_match_patch.DIFF_DELETE: SpanTag.REMOVED,
}


def tokenize_words(text: str) -> List[str]:
    return WORD_TOKEN_PATTERN.findall(text)


def tokenize_lines(text: str) -> List[str]:
    return text.splitlines(keepends=True)


def _new_differ() -> diff_match_patch:
    dmp = diff_match_patch()
    # No timeout: a timed-out diff depends on machine speed, and results
    # must be identical on every run.
    dmp.Diff_Timeout = 0
    return dmp


def _to_spans(diffs: Sequence[Tuple[int, str]], decode: Optional[Callable[[str], str]] = None) -> List[Span]:
    """Convert diff-match-patch tuples to spans, merging neighbours with the same tag."""
    spans: List[Span] = []
    for op, data in diffs:
        text = decode(data) if decode else data
        if not text:
            continue
        tag = _OP_TAGS[op]
        if spans and spans[-1].tag is tag:
            spans[-1] = Span(text=spans[-1].text + text, tag=tag)
        else:
            spans.append(Span(text=text, tag=tag))
    return spans


def _diff_tokens(left_tokens: List[str], right_tokens: List[str]) -> List[Span]:
    distinct = len(set(left_tokens) | set(right_tokens))
    if distinct > MAX_DISTINCT_TOKENS:
        logger.warning("%d distinct tokens exceed the encodable %d, diffing by character",
                       distinct, MAX_DISTINCT_TOKENS)
        return diff_chars("".join(left_tokens), "".join(right_tokens))

    token_codes: Dict[str, str] = {}
    token_list: List[str] = []

    def encode(tokens: List[str]) -> str:
        chars = []
        for token in tokens:
            code = token_codes.get(token)
            if code is None:
                code = chr(len(token_list))
                token_codes[token] = code
                token_list.append(token)
            chars.append(code)
        return "".join(chars)

    left_encoded = encode(left_tokens)
    right_encoded = encode(right_tokens)

    def decode(encoded: str) -> str:
        return "".join(token_list[ord(char)] for char in encoded)

    diffs = _new_differ().diff_main(left_encoded, right_encoded, False)
    return _to_spans(diffs, decode)


def diff_chars(left: str, right: str) -> List[Span]:
    """
    Character-level diff, one token per Unicode code point.

    Args:
        left: Older text (None is treated as empty)
        right: Newer text (None is treated as empty)

    Returns:
        Ordered spans; an empty list when both texts are empty
    """
    left = left or ""
    right = right or ""
    if left == right:
        return [Span(text=left, tag=SpanTag.EQUAL)] if left else []
    diffs = _new_differ().diff_main(left, right, False)
    return _to_spans(diffs)


def diff_words(left: str, right: str) -> List[Span]:
    """
    Word-level diff. Whitespace and punctuation are tokens of their own,
    so changed spacing shows up as a change rather than being dropped.
    """
    left = left or ""
    right = right or ""
    if left == right:
        return [Span(text=left, tag=SpanTag.EQUAL)] if left else []
    return _diff_tokens(tokenize_words(left), tokenize_words(right))


def diff_lines(left: str, right: str) -> List[Span]:
    """Line-level diff; each line keeps its line ending."""
    left = left or ""
    right = right or ""
    if left == right:
        return [Span(text=left, tag=SpanTag.EQUAL)] if left else []
    return _diff_tokens(tokenize_lines(left), tokenize_lines(right))


DIFFERS = {
    "word": diff_words,
    "char": diff_chars,
    "line": diff_lines,
}


def get_differ(granularity: str) -> Callable[[str, str], List[Span]]:
    """Look up the diff function for a granularity name."""
    try:
        return DIFFERS[granularity]
    except KeyError:
        raise ValueError(f"Unknown diff granularity {granularity!r}, expected one of {sorted(DIFFERS)}") from None


def left_text(spans: Sequence[Span]) -> str:
    """Rebuild the left-hand text from a span sequence."""
    return "".join(span.text for span in spans if span.tag is not SpanTag.ADDED)


def right_text(spans: Sequence[Span]) -> str:
    """Rebuild the right-hand text from a span sequence."""
    return "".join(span.text for span in spans if span.tag is not SpanTag.REMOVED)
