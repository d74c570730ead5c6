"""Tokenization and type-token ratio (TTR) measures of lexical richness."""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .scoring import mean, round_half_up

VOCABULARY_SIZE = 20
PREVIEW_LENGTH = 50

_NON_WORD_RE = re.compile(r'[^\w\sáéíóúñü]')
_WHITESPACE_RE = re.compile(r'\s+')
_NUMERIC_RE = re.compile(r'\d+')


@dataclass(frozen=True)
class TokenizedText:
    tokens: Tuple[str, ...]
    types: FrozenSet[str]

    @property
    def ttr(self) -> float:
        """Unique types over tokens, two decimals; 0 for an empty text."""
        if not self.tokens:
            return 0
        return round_half_up(len(self.types) / len(self.tokens), 2)


def tokenize(text: str) -> TokenizedText:
    """Lower-case word tokens longer than one character, numbers excluded."""
    clean = _NON_WORD_RE.sub(' ', (text or '').lower())
    clean = _WHITESPACE_RE.sub(' ', clean).strip()
    tokens = tuple(
        token for token in clean.split()
        if len(token) > 1 and not _NUMERIC_RE.fullmatch(token)
    )
    return TokenizedText(tokens=tokens, types=frozenset(tokens))


def _preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    return text[:length] + ('...' if len(text) > length else '')


def lexical_richness(texts: Iterable[str]) -> Dict:
    """Per-text and aggregate TTR for a group of texts.

    ``ttr`` pools every token of every text, so a word repeated across two
    texts counts as one type. ``averageTTR`` is the mean of the per-text
    values (zeros ignored). Whenever a type recurs across texts the pooled
    value is the lower of the two; both are reported.
    """
    texts = list(texts or [])
    frequencies: Counter = Counter()
    text_analysis: List[Dict] = []
    total_tokens = 0

    for index, text in enumerate(texts, start=1):
        tokenized = tokenize(text)
        text_analysis.append({
            'textIndex': index,
            'preview': _preview(text),
            'tokens': len(tokenized.tokens),
            'types': len(tokenized.types),
            'ttr': tokenized.ttr,
        })
        total_tokens += len(tokenized.tokens)
        frequencies.update(tokenized.tokens)

    unique_types = len(frequencies)
    pooled_ttr = round_half_up(unique_types / total_tokens, 2) if total_tokens else 0
    positive_ttrs = [item['ttr'] for item in text_analysis if item['ttr'] > 0]
    average_ttr = round_half_up(mean(positive_ttrs), 2) if positive_ttrs else 0

    return {
        'totalTokens': total_tokens,
        'uniqueTypes': unique_types,
        'ttr': pooled_ttr,
        'averageTTR': average_ttr,
        'textAnalysis': text_analysis,
        'vocabulary': [
            {'word': word, 'frequency': frequency}
            for word, frequency in frequencies.most_common(VOCABULARY_SIZE)
        ],
    }
