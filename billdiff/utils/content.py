#!/usr/bin/env python3
"""
Content checks shared by every comparison view: HTML detection, size
bounding, and placeholder detection for bill text.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Per-section guard used before diffing
SECTION_MAX_LENGTH = 20000
# Display guard used by the side-by-side view
DISPLAY_MAX_LENGTH = 50000

NO_CONTENT_MESSAGE = "No content available"
TRUNCATION_SUFFIX = " ... [Content truncated to prevent performance issues]"

# A tag is "<" + letter with a ">" somewhere after it. Over-detects on purpose:
# plain text misread as HTML only costs a fallback render.
TAG_OPEN_PATTERN = re.compile(r"<[a-z]", re.IGNORECASE)

# Minimum trimmed length for text to count as real bill content
MIN_VALID_CONTENT_LENGTH = 10

PLACEHOLDER_PHRASES = [
    "no content available",
    "could not load",
    "error loading",
    "not available",
    "no text content",
]


@dataclass(frozen=True)
class ContentClass:
    is_html: bool


def is_html_content(text: Optional[str]) -> bool:
    """Return True if the text contains anything that looks like a markup tag."""
    if not text:
        return False
    # Same matches as a "<[a-z][\s\S]*>" search, in linear time: only the
    # first tag opening matters, since any ">" after it closes some tag.
    match = TAG_OPEN_PATTERN.search(text)
    if match is None:
        return False
    return text.find(">", match.end()) != -1


def classify(text: Optional[str]) -> ContentClass:
    """Classify text as HTML or plain text."""
    return ContentClass(is_html=is_html_content(text))


def bound(text: Optional[str], max_length: int = DISPLAY_MAX_LENGTH) -> str:
    """
    Limit text to ``max_length`` characters to keep diffing and rendering tractable.

    Args:
        text: Text to bound; None yields the "No content available" placeholder
        max_length: Number of characters kept before the truncation marker

    Returns:
        The text unchanged when it fits, otherwise its first ``max_length``
        characters followed by the truncation marker
    """
    if text is None:
        return NO_CONTENT_MESSAGE

    if len(text) > max_length:
        logger.warning("Content truncated from %d to %d characters", len(text), max_length)
        return text[:max_length] + TRUNCATION_SUFFIX
    return text


def has_valid_content(text: Optional[str]) -> bool:
    """
    Check whether text is meaningful bill content rather than empty text or
    a loader placeholder such as "No content available".
    """
    if not text:
        return False

    trimmed = text.strip()
    if len(trimmed) < MIN_VALID_CONTENT_LENGTH:
        return False

    lowered = trimmed.lower()
    return not any(phrase in lowered for phrase in PLACEHOLDER_PHRASES)
