"""Linguistic quality analysis of educational resources.

``analyze_resource`` scores one resource: grammatical correctness over its
sentences and lexical richness over its text fragments, combined into a
0-100 score and a quality level. ``analyze_batch`` rolls many of those up.

Two different "global" numbers come out of a batch and both are kept:

* ``summary.averageGrammaticalCorrectness`` / ``summary.averageLexicalRichness``
  are arithmetic means of the per-resource values (zeros ignored). Every
  resource weighs the same no matter how long it is.
* ``aggregatedMetrics.globalGrammaticalPercentage`` / ``aggregatedMetrics.globalTTR``
  are computed from pooled totals. Unique types are summed per resource, not
  deduplicated across resources, so the pooled TTR over a batch is an upper
  bound of the true corpus-wide TTR.

Nothing here touches the database; callers pass resources in.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from flask import current_app

from .lexical_analyzer import lexical_richness
from .lexicon import DEFAULT_LEXICON, GrammarLexicon
from .resource_content import ResourceRecord
from .scoring import combined_score, mean, quality_level, round_half_up
from .sentence_analyzer import grammatical_correctness
from .text_extractor import extract_texts

NO_CONTENT_ERROR = 'No se encontró contenido textual para analizar'
ANALYSIS_ERROR_PREFIX = 'Error al analizar el recurso: '
NO_RESOURCES_ERROR = 'No se proporcionaron recursos para analizar'
MAX_INDIVIDUAL_ANALYSES = 10
MAX_TEXT_PREVIEWS = 3
TEXT_PREVIEW_LENGTH = 100


def _preview(text: str) -> str:
    return text[:TEXT_PREVIEW_LENGTH] + ('...' if len(text) > TEXT_PREVIEW_LENGTH else '')


def _error_result(message: str, record: Optional[ResourceRecord]) -> Dict[str, Any]:
    info = record.info(with_created_at=False) if record else {'id': None, 'titulo': None, 'tipo': None}
    return {'error': message, 'resourceInfo': info}


def analyze_resource(resource: Any, lexicon: GrammarLexicon = DEFAULT_LEXICON) -> Dict[str, Any]:
    """Analyse one resource.

    Returns the full analysis, or ``{'error', 'resourceInfo'}`` when the
    resource has no text or the analysis fails. Never raises.
    """
    record = None
    try:
        record = ResourceRecord.from_obj(resource)
        current_app.logger.info('Analyzing semantic metrics for resource %s (%s)', record.id, record.titulo)

        texts = extract_texts(record)
        if not texts:
            return _error_result(NO_CONTENT_ERROR, record)

        grammar = grammatical_correctness(texts, lexicon)
        lexical = lexical_richness(texts)
        score = combined_score(grammar['percentage'], lexical['averageTTR'])

        return {
            'resourceInfo': record.info(),
            'textExtraction': {
                'totalTexts': len(texts),
                'textPreviews': [_preview(text) for text in texts[:MAX_TEXT_PREVIEWS]],
            },
            'grammaticalCorrectness': grammar,
            'lexicalRichness': lexical,
            'overallQuality': {
                'grammaticalScore': grammar['percentage'],
                'lexicalScore': round_half_up(lexical['averageTTR'] * 100),
                'combinedScore': score,
                'qualityLevel': quality_level(score).value,
            },
        }
    except Exception as exc:
        current_app.logger.error('Semantic analysis failed for resource: %s', exc)
        return _error_result(ANALYSIS_ERROR_PREFIX + str(exc), record)


def analyze_resources(resources: Iterable[Any], lexicon: GrammarLexicon = DEFAULT_LEXICON) -> List[Dict[str, Any]]:
    """Analyse resources one after the other, keeping input order."""
    return [analyze_resource(resource, lexicon) for resource in resources]


def resource_type_breakdown(analyses: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Average grammar percentage and TTR per resource type tag."""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for analysis in analyses:
        grouped.setdefault(analysis['resourceInfo']['tipo'], []).append(analysis)

    breakdown = {}
    for tipo, items in grouped.items():
        breakdown[tipo] = {
            'count': len(items),
            'avgGrammatical': round_half_up(mean(a['grammaticalCorrectness']['percentage'] for a in items)),
            'avgLexical': round_half_up(mean(a['lexicalRichness']['averageTTR'] for a in items), 2),
        }
    return breakdown


def summarize_analyses(analyses: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate already computed resource analyses into a batch report."""
    analyzed = [analysis for analysis in analyses if 'error' not in analysis]

    total_texts = sum(a['textExtraction']['totalTexts'] for a in analyzed)
    total_sentences = sum(a['grammaticalCorrectness']['totalSentences'] for a in analyzed)
    total_correct = sum(a['grammaticalCorrectness']['correctSentences'] for a in analyzed)
    total_tokens = sum(a['lexicalRichness']['totalTokens'] for a in analyzed)
    total_types = sum(a['lexicalRichness']['uniqueTypes'] for a in analyzed)

    percentages = [a['grammaticalCorrectness']['percentage'] for a in analyzed]
    ttrs = [a['lexicalRichness']['averageTTR'] for a in analyzed]
    average_grammar = round_half_up(mean(p for p in percentages if p > 0))
    average_lexical = round_half_up(mean(t for t in ttrs if t > 0), 2)

    global_ttr = round_half_up(total_types / total_tokens, 2) if total_tokens else 0
    global_grammar = round_half_up(total_correct / total_sentences * 100) if total_sentences else 0

    return {
        'summary': {
            'totalResources': len(analyses),
            'analyzedResources': len(analyzed),
            'failedAnalyses': len(analyses) - len(analyzed),
            'averageGrammaticalCorrectness': average_grammar,
            'averageLexicalRichness': average_lexical,
            'globalTTR': global_ttr,
            'overallQuality': quality_level(combined_score(average_grammar, average_lexical)).value,
        },
        'aggregatedMetrics': {
            'totalTexts': total_texts,
            'totalSentences': total_sentences,
            'totalCorrectSentences': total_correct,
            'globalGrammaticalPercentage': global_grammar,
            'totalTokens': total_tokens,
            'totalUniqueTypes': total_types,
            'globalTTR': global_ttr,
        },
        'individualAnalyses': analyzed[:MAX_INDIVIDUAL_ANALYSES],
        'resourceTypes': resource_type_breakdown(analyzed),
    }


def analyze_batch(resources: Iterable[Any], lexicon: GrammarLexicon = DEFAULT_LEXICON) -> Dict[str, Any]:
    """Analyse a collection of resources and aggregate the results.

    Resources whose analysis returns an error stay in ``totalResources`` and
    ``failedAnalyses`` but are left out of every average and total.
    """
    resources = list(resources or [])
    current_app.logger.info('Analyzing semantic metrics for %d resources', len(resources))

    batch = summarize_analyses(analyze_resources(resources, lexicon))
    if not resources:
        batch['error'] = NO_RESOURCES_ERROR
    return batch
