"""
Turn a raw completion into the list of suggestions shown in the editor.
The rules are heuristics tuned to what the model actually returns for each prompt;
they never raise, the worst case is an empty list.
"""
import re
from typing import List

from app.config.suggestion_contexts import (
    CONNECTOR_WORDS,
    LINE_MAX_ITEMS,
    LINE_MAX_LENGTH,
    LIST_CONTEXTS,
    LIST_ITEM_MAX_LENGTH,
    LIST_MIN_ITEMS,
    PARAGRAPH_CONTEXTS,
    PARAGRAPH_MAX_SENTENCES,
)


def _variant_pattern(variant: str) -> str:
    """Literal variant with flexible inner whitespace ("About Me:" also matches "AboutMe:")."""
    return r"\s*".join(re.escape(word) for word in variant.split())


def _compile_prefix(variants: List[str]) -> re.Pattern:
    alternatives = []
    for variant in variants:
        pattern = _variant_pattern(variant)
        if not variant.endswith(":"):
            # "Here are 12 skills for the role:" -> drop the whole intro up to its colon
            alternatives.append(pattern + r"\b[^:\n,]*:")
        alternatives.append(pattern)
    return re.compile(r"^\s*(?:" + "|".join(alternatives) + ")", re.IGNORECASE)


LIST_PREFIX_PATTERNS = {
    context: (_compile_prefix(variants), limit)
    for context, (variants, limit) in LIST_CONTEXTS.items()
}

PARAGRAPH_PREFIX_PATTERNS = {
    context: _compile_prefix(variants)
    for context, variants in PARAGRAPH_CONTEXTS.items()
}

_connectors = "|".join(CONNECTOR_WORDS)
LEADING_CONNECTOR_PATTERN = re.compile(rf"^(?:{_connectors})\b", re.IGNORECASE)
CONNECTOR_ONLY_PATTERN = re.compile(rf"^(?:{_connectors})$", re.IGNORECASE)

LIST_DELIMITERS = re.compile(r"[,;\n]")
LIST_FALLBACK_DELIMITERS = re.compile(r"[,\s]+")
# Items made only of punctuation ("-", ";;;") are delimiter debris, not suggestions.
WORD_CHARACTER = re.compile(r"\w")


def _clean_items(parts: List[str]) -> List[str]:
    items = []
    for part in parts:
        item = part.strip()
        if not WORD_CHARACTER.search(item) or len(item) >= LIST_ITEM_MAX_LENGTH:
            continue
        if CONNECTOR_ONLY_PATTERN.match(item):
            continue
        items.append(item)
    return items


def split_list_items(text: str, prefix_pattern: re.Pattern, limit: int) -> List[str]:
    """
    Comma/semicolon/newline separated list, e.g. skills or technologies.
    Falls back to splitting on whitespace too when the first pass finds too few items.
    """
    cleaned = prefix_pattern.sub("", text, count=1).strip()
    cleaned = LEADING_CONNECTOR_PATTERN.sub("", cleaned, count=1).strip()

    items = _clean_items(LIST_DELIMITERS.split(cleaned))
    if len(items) < LIST_MIN_ITEMS:
        items = _clean_items(LIST_FALLBACK_DELIMITERS.split(cleaned))
    return items[:limit]


def condense_paragraph(text: str, prefix_pattern: re.Pattern) -> List[str]:
    """Whole completion as one suggestion, cut to its first sentences."""
    summary = prefix_pattern.sub("", text.strip(), count=1).strip()
    sentences = [s.strip() for s in summary.split(".") if s.strip()]
    summary = ". ".join(sentences[:PARAGRAPH_MAX_SENTENCES])
    if not summary:
        return []
    if not summary.endswith("."):
        summary += "."
    return [summary]


def split_lines(text: str) -> List[str]:
    lines = [line.strip() for line in text.split("\n")]
    return [line for line in lines if 0 < len(line) < LINE_MAX_LENGTH][:LINE_MAX_ITEMS]


def normalize_suggestions(raw_text, context) -> List[str]:
    """
    Parse `raw_text` according to the rules for `context`.

    - list contexts (skills, technologies): delimited items, capped per context
    - paragraph contexts (project description, about me): one element, at most 3 sentences
    - everything else: up to 3 non-empty lines
    """
    if not isinstance(raw_text, str):
        return []

    if context in LIST_PREFIX_PATTERNS:
        prefix_pattern, limit = LIST_PREFIX_PATTERNS[context]
        return split_list_items(raw_text, prefix_pattern, limit)
    if context in PARAGRAPH_PREFIX_PATTERNS:
        return condense_paragraph(raw_text, PARAGRAPH_PREFIX_PATTERNS[context])
    return split_lines(raw_text)
