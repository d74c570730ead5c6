"""Report views built on top of the batch analysis.

These shape the numbers of ``semantic_analyzer`` for the dashboard, the
periodic metrics report, the per-type report and the per-user report.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from .lexicon import DEFAULT_LEXICON, GrammarLexicon
from .resource_content import ResourceRecord
from .scoring import QualityLevel, combined_score, mean, quality_level, round_half_up
from .semantic_analyzer import analyze_batch, analyze_resources, summarize_analyses

NO_LIMIT = 'Sin límite'
NO_RESOURCES = 'Sin recursos'
NO_DATA = 'Sin datos'
UNKNOWN_TYPE = 'sin_tipo'
MAX_TYPE_EXAMPLES = 3
HIGH_VOLUME_RESOURCES = 100


# ---------------------------------------------------------------------------
# Interpretation ladders

def grammatical_interpretation(percentage: float) -> str:
    if percentage >= 90:
        return 'Excelente: La mayoría de oraciones son gramaticalmente correctas'
    if percentage >= 80:
        return 'Bueno: La gran mayoría de oraciones son correctas'
    if percentage >= 70:
        return 'Regular: La mayoría de oraciones son correctas, hay margen de mejora'
    if percentage >= 60:
        return 'Mejorable: Algunas oraciones necesitan revisión gramatical'
    return 'Necesita mejora: Se recomienda revisar la gramática del contenido'


def lexical_interpretation(ttr: float) -> str:
    if ttr >= 0.7:
        return 'Excelente: Vocabulario muy variado y rico'
    if ttr >= 0.6:
        return 'Bueno: Vocabulario variado con buena diversidad'
    if ttr >= 0.5:
        return 'Regular: Vocabulario moderadamente variado'
    if ttr >= 0.4:
        return 'Mejorable: Se podría incrementar la variedad de vocabulario'
    return 'Necesita mejora: Vocabulario limitado, se recomienda mayor diversidad'


_LEVEL_COLORS = {
    QualityLevel.EXCELLENT: 'green',
    QualityLevel.GOOD: 'blue',
    QualityLevel.REGULAR: 'yellow',
    QualityLevel.NEEDS_IMPROVEMENT_MILD: 'orange',
}


def _grammatical_tier(percentage: float) -> QualityLevel:
    if percentage >= 85:
        return QualityLevel.EXCELLENT
    if percentage >= 75:
        return QualityLevel.GOOD
    if percentage >= 65:
        return QualityLevel.REGULAR
    return QualityLevel.NEEDS_IMPROVEMENT_MILD


def _lexical_tier(ttr: float) -> QualityLevel:
    if ttr >= 0.6:
        return QualityLevel.EXCELLENT
    if ttr >= 0.5:
        return QualityLevel.GOOD
    if ttr >= 0.4:
        return QualityLevel.REGULAR
    return QualityLevel.NEEDS_IMPROVEMENT_MILD


def _tier_color(tier: QualityLevel) -> str:
    # Dimension tiers bottom out in red rather than orange.
    if tier is QualityLevel.NEEDS_IMPROVEMENT_MILD:
        return 'red'
    return _LEVEL_COLORS[tier]


def quality_color(level: str) -> str:
    try:
        return _LEVEL_COLORS.get(QualityLevel(level), 'red')
    except ValueError:
        return 'red'


def generate_recommendations(summary: Dict[str, Any]) -> List[Dict[str, str]]:
    grammar = summary.get('averageGrammaticalCorrectness', 0)
    lexical = summary.get('averageLexicalRichness', 0)
    recommendations = []

    if grammar < 70:
        recommendations.append({
            'type': 'grammar',
            'priority': 'high',
            'message': ('Se recomienda revisar la gramática del contenido generado. Considera ajustar '
                        'los prompts para mejorar la estructura de las oraciones.'),
        })
    if lexical < 0.5:
        recommendations.append({
            'type': 'vocabulary',
            'priority': 'medium',
            'message': ('El vocabulario podría ser más variado. Intenta incluir más sinónimos y '
                        'palabras descriptivas en tus recursos.'),
        })
    if grammar >= 85 and lexical >= 0.6:
        recommendations.append({
            'type': 'congratulations',
            'priority': 'info',
            'message': '¡Excelente trabajo! Tus recursos mantienen una alta calidad en gramática y vocabulario.',
        })
    return recommendations


def generate_insights(by_type: Dict[str, Dict[str, Any]], global_summary: Dict[str, Any]) -> List[Dict[str, str]]:
    insights = []
    avg_grammar = global_summary['avgGrammatical']
    avg_lexical = global_summary['avgLexical']

    if avg_grammar >= 80:
        insights.append({
            'type': 'positive',
            'category': 'Gramática',
            'message': f'Excelente calidad gramatical promedio: {avg_grammar}%',
        })
    elif avg_grammar < 60:
        insights.append({
            'type': 'warning',
            'category': 'Gramática',
            'message': f'La calidad gramatical promedio ({avg_grammar}%) necesita mejora',
        })

    if avg_lexical >= 0.6:
        insights.append({
            'type': 'positive',
            'category': 'Vocabulario',
            'message': f'Buena riqueza léxica promedio: {avg_lexical}',
        })
    elif avg_lexical < 0.4:
        insights.append({
            'type': 'warning',
            'category': 'Vocabulario',
            'message': (f'La riqueza léxica promedio ({avg_lexical}) podría mejorar con mayor '
                        'variedad de vocabulario'),
        })

    if len(by_type) > 1:
        def type_score(item):
            summary = item[1]['summary']
            return summary['averageGrammaticalCorrectness'] + summary['averageLexicalRichness'] * 100

        # max/min keep the first of equal scores
        best_type, best = max(by_type.items(), key=type_score)
        worst_type, worst = min(by_type.items(), key=type_score)
        insights.append({
            'type': 'info',
            'category': 'Tipos de recursos',
            'message': (f'Mejor rendimiento: "{best_type}" ({best["resourceCount"]} recursos). '
                        f'Menor rendimiento: "{worst_type}" ({worst["resourceCount"]} recursos)'),
        })

    if global_summary['totalResources'] > HIGH_VOLUME_RESOURCES:
        insights.append({
            'type': 'positive',
            'category': 'Volumen',
            'message': (f'Gran volumen de datos analizados: {global_summary["totalResources"]} recursos, '
                        f'{global_summary["totalSentences"]} oraciones'),
        })
    return insights


# ---------------------------------------------------------------------------
# Reports

def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _type_tag(resource: Any) -> str:
    tipo = ResourceRecord.from_obj(resource).tipo
    return tipo if isinstance(tipo, str) else UNKNOWN_TYPE


def build_type_report(
    resources: Iterable[Any],
    include_examples: bool = False,
    fecha_desde: Optional[str] = None,
    fecha_hasta: Optional[str] = None,
    lexicon: GrammarLexicon = DEFAULT_LEXICON,
) -> Dict[str, Any]:
    """Batch-analyse resources grouped by type and summarise across types."""
    resources = list(resources)
    period = {'fechaDesde': fecha_desde or NO_LIMIT, 'fechaHasta': fecha_hasta or NO_LIMIT}
    if not resources:
        return {
            'reportDate': _utc_now_iso(),
            'period': period,
            'globalSummary': {'totalResources': 0},
            'byResourceType': {},
            'insights': [],
        }

    grouped: Dict[str, List[Any]] = {}
    for resource in resources:
        grouped.setdefault(_type_tag(resource), []).append(resource)

    by_type: Dict[str, Dict[str, Any]] = {}
    totals = {'totalTexts': 0, 'totalSentences': 0, 'totalCorrectSentences': 0, 'totalTokens': 0, 'totalTypes': 0}
    grammar_scores: List[float] = []
    lexical_scores: List[float] = []

    for tipo, group in grouped.items():
        batch = analyze_batch(group, lexicon)
        entry = {
            'resourceCount': len(group),
            'summary': batch['summary'],
            'aggregatedMetrics': batch['aggregatedMetrics'],
        }
        if include_examples:
            entry['examples'] = batch['individualAnalyses'][:MAX_TYPE_EXAMPLES]
        by_type[tipo] = entry

        metrics = batch['aggregatedMetrics']
        totals['totalTexts'] += metrics['totalTexts']
        totals['totalSentences'] += metrics['totalSentences']
        totals['totalCorrectSentences'] += metrics['totalCorrectSentences']
        totals['totalTokens'] += metrics['totalTokens']
        totals['totalTypes'] += metrics['totalUniqueTypes']

        if batch['summary']['averageGrammaticalCorrectness'] > 0:
            grammar_scores.append(batch['summary']['averageGrammaticalCorrectness'])
        if batch['summary']['averageLexicalRichness'] > 0:
            lexical_scores.append(batch['summary']['averageLexicalRichness'])

    avg_grammar = round_half_up(mean(grammar_scores))
    avg_lexical = round_half_up(mean(lexical_scores), 2)
    score = combined_score(avg_grammar, avg_lexical)

    global_summary = {
        'totalResources': len(resources),
        **totals,
        'avgGrammatical': avg_grammar,
        'avgLexical': avg_lexical,
        'globalGrammaticalPercentage': (
            round_half_up(totals['totalCorrectSentences'] / totals['totalSentences'] * 100)
            if totals['totalSentences'] else 0
        ),
        'globalTTR': round_half_up(totals['totalTypes'] / totals['totalTokens'], 2) if totals['totalTokens'] else 0,
    }

    return {
        'reportDate': _utc_now_iso(),
        'period': period,
        'globalSummary': {
            **global_summary,
            'overallQuality': quality_level(score).value,
            'combinedScore': score,
        },
        'byResourceType': by_type,
        'insights': generate_insights(by_type, global_summary),
    }


def build_metrics_report(
    resources: Iterable[Any],
    period_days: int,
    lexicon: GrammarLexicon = DEFAULT_LEXICON,
) -> Dict[str, Any]:
    """Period report with interpretations and recommendations."""
    resources = list(resources)
    period = f'Últimos {period_days} días'
    if not resources:
        return {
            'period': period,
            'resourceCount': 0,
            'summary': {
                'averageGrammaticalCorrectness': 0,
                'averageLexicalRichness': 0,
                'overallQuality': NO_DATA,
            },
        }

    batch = analyze_batch(resources, lexicon)
    summary = batch['summary']
    return {
        'period': period,
        'generatedAt': _utc_now_iso(),
        'resourceCount': len(resources),
        'summary': summary,
        'metrics': {
            'grammaticalCorrectness': {
                'average': summary['averageGrammaticalCorrectness'],
                'description': 'Porcentaje promedio de oraciones gramaticalmente correctas',
                'interpretation': grammatical_interpretation(summary['averageGrammaticalCorrectness']),
            },
            'lexicalRichness': {
                'average': summary['averageLexicalRichness'],
                'description': 'Riqueza léxica promedio (TTR - Type-Token Ratio)',
                'interpretation': lexical_interpretation(summary['averageLexicalRichness']),
            },
        },
        'byResourceType': batch['resourceTypes'],
        'recommendations': generate_recommendations(summary),
    }


def build_dashboard_metrics(resources: Iterable[Any], lexicon: GrammarLexicon = DEFAULT_LEXICON) -> Dict[str, Any]:
    """Compact levels and colours for the dashboard cards."""
    resources = list(resources)
    if not resources:
        return {'hasData': False, 'message': 'No tienes recursos para analizar aún'}

    batch = analyze_batch(resources, lexicon)
    summary = batch['summary']
    grammar = summary['averageGrammaticalCorrectness']
    lexical = summary['averageLexicalRichness']
    grammar_tier = _grammatical_tier(grammar)
    lexical_tier = _lexical_tier(lexical)

    return {
        'hasData': True,
        'resourcesAnalyzed': len(resources),
        'grammaticalCorrectness': {
            'value': grammar,
            'level': grammar_tier.value,
            'color': _tier_color(grammar_tier),
        },
        'lexicalRichness': {
            'value': lexical,
            'level': lexical_tier.value,
            'color': _tier_color(lexical_tier),
        },
        'overallQuality': {
            'level': summary['overallQuality'],
            'color': quality_color(summary['overallQuality']),
        },
        'totalTexts': batch['aggregatedMetrics']['totalTexts'],
        'totalWords': batch['aggregatedMetrics']['totalTokens'],
    }


_BREAKDOWN_KEYS = {
    QualityLevel.EXCELLENT.value: 'excellent',
    QualityLevel.GOOD.value: 'good',
    QualityLevel.REGULAR.value: 'regular',
}


def build_user_report(user: Any, user_id: int, resources: Iterable[Any],
                      lexicon: GrammarLexicon = DEFAULT_LEXICON) -> Dict[str, Any]:
    """Quality summary of one user's resources."""
    resources = list(resources)
    name = getattr(user, 'nombre', None) or 'Usuario no encontrado'
    breakdown = {'excellent': 0, 'good': 0, 'regular': 0, 'poor': 0}

    if not resources:
        return {
            'user': name,
            'userId': user_id,
            'totalResources': 0,
            'metrics': {'averageGrammar': 0, 'averageTTR': 0, 'overallQuality': NO_RESOURCES},
            'breakdown': breakdown,
        }

    analyses = analyze_resources(resources, lexicon)
    ttrs = []
    for analysis in analyses:
        if 'error' in analysis:
            continue
        ttr = analysis['lexicalRichness']['averageTTR']
        if ttr > 0:
            ttrs.append(ttr)
        level = analysis['overallQuality']['qualityLevel']
        breakdown[_BREAKDOWN_KEYS.get(level, 'poor')] += 1

    summary = summarize_analyses(analyses)['summary']
    return {
        'user': name,
        'userId': user_id,
        'totalResources': len(resources),
        'metrics': {
            'averageGrammar': summary['averageGrammaticalCorrectness'],
            'averageTTR': round_half_up(mean(ttrs), 3),
            'overallQuality': summary['overallQuality'],
        },
        'breakdown': breakdown,
        'analyzedResources': summary['analyzedResources'],
        'failedAnalyses': summary['failedAnalyses'],
    }
