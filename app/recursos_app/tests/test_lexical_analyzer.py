import pytest

from app.recursos_app.services.lexical_analyzer import lexical_richness, tokenize
from app.recursos_app.services.scoring import (
    QualityLevel,
    combined_score,
    mean,
    quality_level,
    round_half_up,
)


def test_tokenize_lowercases_and_drops_short_and_numeric_tokens():
    tokenized = tokenize('El perro, el PERRO y 3 gatos! Año 2024, día uno')
    assert tokenized.tokens == ('el', 'perro', 'el', 'perro', 'gatos', 'año', 'día', 'uno')
    assert tokenized.types == frozenset({'el', 'perro', 'gatos', 'año', 'día', 'uno'})


def test_tokenize_keeps_accented_words_whole():
    assert tokenize('¿Dónde está la niña?').tokens == ('dónde', 'está', 'la', 'niña')


def test_ttr_is_rounded_and_zero_for_empty_text():
    assert tokenize('el perro el perro gatos').ttr == 0.6
    assert tokenize('uno dos tres uno dos tres uno').ttr == 0.43
    assert tokenize('').ttr == 0
    assert tokenize('1 2 3 ! ?').ttr == 0


def test_lexical_richness_pools_types_across_texts():
    result = lexical_richness(['El gato come.', 'El gato duerme.'])

    assert result['totalTokens'] == 6
    assert result['uniqueTypes'] == 4
    assert result['ttr'] == 0.67
    assert result['averageTTR'] == 1.0
    assert result['vocabulary'][:2] == [
        {'word': 'el', 'frequency': 2},
        {'word': 'gato', 'frequency': 2},
    ]


def test_average_ttr_ignores_texts_without_tokens():
    result = lexical_richness(['casa casa perro', '123 !!'])

    assert result['averageTTR'] == 0.67
    assert [item['ttr'] for item in result['textAnalysis']] == [0.67, 0]


def test_text_analysis_previews_are_truncated():
    long_text = 'palabra ' * 20
    result = lexical_richness(['Hola mundo', long_text])

    first, second = result['textAnalysis']
    assert first == {'textIndex': 1, 'preview': 'Hola mundo', 'tokens': 2, 'types': 2, 'ttr': 1.0}
    assert second['textIndex'] == 2
    assert second['preview'] == long_text[:50] + '...'
    assert second['tokens'] == 20
    assert second['ttr'] == 0.05


def test_vocabulary_is_capped_at_twenty_words():
    words = ' '.join(f'palabra{chr(97 + index)}' for index in range(25))
    result = lexical_richness([words])
    assert len(result['vocabulary']) == 20
    assert result['uniqueTypes'] == 25


def test_lexical_richness_of_nothing():
    assert lexical_richness([]) == {
        'totalTokens': 0,
        'uniqueTypes': 0,
        'ttr': 0,
        'averageTTR': 0,
        'textAnalysis': [],
        'vocabulary': [],
    }


@pytest.mark.parametrize('value,ndigits,expected', [
    (0.5, 0, 1),
    (2.5, 0, 3),
    (66.666, 0, 67),
    (49.4, 0, 49),
    (0.125, 2, 0.13),
    (0.9375, 2, 0.94),
    (0.6666, 3, 0.667),
])
def test_round_half_up(value, ndigits, expected):
    assert round_half_up(value, ndigits) == expected


def test_round_half_up_returns_int_without_digits():
    assert isinstance(round_half_up(79.5), int)


def test_mean_of_nothing_is_zero():
    assert mean([]) == 0.0
    assert mean([1, 2, 3]) == 2


def test_combined_score_weights_grammar_and_lexicon():
    assert combined_score(100, 1.0) == 100
    assert combined_score(0, 0) == 0
    assert combined_score(50, 0.5) == 50
    assert combined_score(100, 0.94) == 98


@pytest.mark.parametrize('score,level', [
    (100, QualityLevel.EXCELLENT),
    (80, QualityLevel.EXCELLENT),
    (79, QualityLevel.GOOD),
    (70, QualityLevel.GOOD),
    (69, QualityLevel.REGULAR),
    (60, QualityLevel.REGULAR),
    (59, QualityLevel.NEEDS_IMPROVEMENT_MILD),
    (50, QualityLevel.NEEDS_IMPROVEMENT_MILD),
    (49, QualityLevel.NEEDS_IMPROVEMENT),
    (0, QualityLevel.NEEDS_IMPROVEMENT),
])
def test_quality_ladder(score, level):
    assert quality_level(score) is level


def test_quality_labels():
    assert [level.value for level in QualityLevel] == [
        'Excelente', 'Bueno', 'Regular', 'Mejorable', 'Necesita mejora',
    ]
