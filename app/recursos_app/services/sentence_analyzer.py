"""Sentence segmentation and a checklist heuristic for Spanish sentences.

``is_grammatical`` is not a parser. It runs nine cheap checks against a
sentence and accepts it when at least 70% of them pass. The verdict depends
on list membership, so the word lists are passed in as a ``GrammarLexicon``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .lexicon import DEFAULT_LEXICON, GrammarLexicon
from .scoring import round_half_up

GRAMMATICAL_THRESHOLD = 0.7
MIN_SENTENCE_WORDS = 2
MAX_EXAMPLES = 5

_WHITESPACE_RE = re.compile(r'\s+')
_SENTENCE_END_RE = re.compile(r'[.!?]+')
_QUOTES = str.maketrans({
    '“': '"', '”': '"',
    '‘': "'", '’': "'",
})

_WORD_RE = re.compile(r'\w+')
_REPEATED_WORD_RE = re.compile(r'\b(\w+)\s+\1\b')
_CAPITAL_START_RE = re.compile(r'^[A-ZÁÉÍÓÚÑÜ]')
_WEIRD_PATTERN_RE = re.compile(r'[0-9]{3,}|[^a-záéíóúñüA-ZÁÉÍÓÚÑÜ\s.,!?¿¡()":;-]|(.)\1{3,}')


def segment_sentences(text: str) -> List[str]:
    """Split text into sentences of at least two words."""
    clean = _WHITESPACE_RE.sub(' ', text or '').translate(_QUOTES).strip()

    sentences = []
    for fragment in _SENTENCE_END_RE.split(clean):
        fragment = fragment.strip()
        if len(fragment.split()) >= MIN_SENTENCE_WORDS:
            sentences.append(fragment)
    return sentences


@lru_cache(maxsize=8)
def _clash_pattern(pairs: FrozenSet[Tuple[str, str]]) -> Optional[re.Pattern]:
    if not pairs:
        return None
    alternatives = '|'.join(re.escape(f'{first} {second}') for first, second in sorted(pairs))
    return re.compile(rf'\b(?:{alternatives})\b')


@lru_cache(maxsize=8)
def _leading_preposition_pattern(prepositions: FrozenSet[str]) -> Optional[re.Pattern]:
    if not prepositions:
        return None
    alternatives = '|'.join(re.escape(word) for word in sorted(prepositions))
    return re.compile(rf'^(?:{alternatives})\s')


@dataclass(frozen=True)
class GrammaticalityVerdict:
    sentence: str
    checks: Dict[str, bool]

    @property
    def passed(self) -> int:
        return sum(1 for ok in self.checks.values() if ok)

    @property
    def total(self) -> int:
        return len(self.checks)

    @property
    def ratio(self) -> float:
        return self.passed / self.total if self.total else 0.0

    @property
    def is_grammatical(self) -> bool:
        return self.ratio >= GRAMMATICAL_THRESHOLD


def check_sentence(sentence: str, lexicon: GrammarLexicon = DEFAULT_LEXICON) -> GrammaticalityVerdict:
    """Run the nine-item checklist against one sentence."""
    stripped = sentence.strip()
    lowered = stripped.lower()
    words = set(_WORD_RE.findall(lowered))

    clash = _clash_pattern(lexicon.article_clashes)
    preposition = _leading_preposition_pattern(lexicon.prepositions)

    checks = {
        'has_verb': not lexicon.verbs.isdisjoint(words),
        'has_subject': not lexicon.subjects.isdisjoint(words),
        'no_double_articles': clash is None or not clash.search(lowered),
        'no_leading_preposition': preposition is None or not preposition.match(lowered),
        'no_repetition': not _REPEATED_WORD_RE.search(lowered),
        'starts_with_capital': bool(_CAPITAL_START_RE.match(stripped)),
        'multiple_words': len(stripped.split()) > 1,
        'no_weird_patterns': not _WEIRD_PATTERN_RE.search(sentence),
        'no_blacklisted_words': lexicon.blacklist.isdisjoint(words),
    }
    return GrammaticalityVerdict(sentence=sentence, checks=checks)


def is_grammatical(sentence: str, lexicon: GrammarLexicon = DEFAULT_LEXICON) -> bool:
    return check_sentence(sentence, lexicon).is_grammatical


def grammatical_correctness(texts: Iterable[str], lexicon: GrammarLexicon = DEFAULT_LEXICON) -> Dict:
    """Classify every sentence of every text and summarise the verdicts."""
    correct: List[str] = []
    incorrect: List[str] = []

    for text in texts or []:
        for sentence in segment_sentences(text):
            if is_grammatical(sentence, lexicon):
                correct.append(sentence)
            else:
                incorrect.append(sentence)

    total = len(correct) + len(incorrect)
    percentage = round_half_up(len(correct) / total * 100) if total else 0

    return {
        'totalSentences': total,
        'correctSentences': len(correct),
        'incorrectSentences': len(incorrect),
        'percentage': percentage,
        'examples': {
            'correct': correct[:MAX_EXAMPLES],
            'incorrect': incorrect[:MAX_EXAMPLES],
        },
    }
