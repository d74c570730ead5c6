import pytest

from app.recursos_app.services.lexicon import (
    COMMON_VERBS,
    DEFAULT_LEXICON,
    INAPPROPRIATE_WORDS,
    LEADING_PREPOSITIONS,
    MEANINGLESS_WORDS,
    SUBJECT_MARKERS,
    GrammarLexicon,
)
from app.recursos_app.services.sentence_analyzer import (
    check_sentence,
    grammatical_correctness,
    is_grammatical,
    segment_sentences,
)


@pytest.fixture
def tiny_lexicon():
    return GrammarLexicon(verbs=frozenset({'come'}), subjects=frozenset({'niña'}))


def test_segment_splits_on_terminal_punctuation_runs():
    text = 'Hola. Esto es una prueba!! ¿Funciona bien? Sí...'
    assert segment_sentences(text) == ['Esto es una prueba', '¿Funciona bien']


def test_segment_normalizes_whitespace_and_curly_quotes():
    text = '“Hola   amigo”\n dijo  Ana. ‘Vale’ contestó Luis.'
    assert segment_sentences(text) == ['"Hola amigo" dijo Ana', "'Vale' contestó Luis"]


def test_segment_of_punctuation_only_is_empty():
    assert segment_sentences('...!?') == []
    assert segment_sentences('') == []


@pytest.mark.parametrize('text', [
    'Uno. Dos tres. Cuatro cinco seis!',
    'Título\n\nEl gato duerme. Fin',
    'a b. c. d e f? g',
    '   ',
])
def test_every_segmented_sentence_has_two_words(text):
    for sentence in segment_sentences(text):
        assert len(sentence.split()) >= 2


def test_well_formed_sentence_passes_all_checks():
    verdict = check_sentence('La niña come manzana')
    assert verdict.passed == 9
    assert verdict.total == 9
    assert verdict.is_grammatical


def test_seven_of_nine_checks_is_accepted(tiny_lexicon):
    verdict = check_sentence('Mucho ruido siempre', tiny_lexicon)
    assert not verdict.checks['has_verb']
    assert not verdict.checks['has_subject']
    assert verdict.passed == 7
    assert is_grammatical('Mucho ruido siempre', tiny_lexicon)


def test_six_of_nine_checks_is_rejected(tiny_lexicon):
    verdict = check_sentence('mucho ruido siempre', tiny_lexicon)
    assert verdict.passed == 6
    assert not verdict.checks['starts_with_capital']
    assert not is_grammatical('mucho ruido siempre', tiny_lexicon)


def test_substitute_lexicon_changes_the_verdict(tiny_lexicon):
    assert is_grammatical('El perro corre rápido')
    assert check_sentence('El perro corre rápido', tiny_lexicon).passed == 7


@pytest.mark.parametrize('sentence,check', [
    ('El la casa es bonita', 'no_double_articles'),
    ('Una un perro come', 'no_double_articles'),
    ('En la casa vive un gato', 'no_leading_preposition'),
    ('El perro perro come', 'no_repetition'),
    ('el gato come', 'starts_with_capital'),
    ('Tengo 1234 manzanas', 'no_weird_patterns'),
    ('Holaaaa amigo', 'no_weird_patterns'),
    ('El precio es $ alto', 'no_weird_patterns'),
    ('Esto es una mierda', 'no_blacklisted_words'),
    ('La prueba es fácil', 'no_blacklisted_words'),
])
def test_individual_checks_fail(sentence, check):
    assert check_sentence(sentence).checks[check] is False


def test_accented_capital_and_punctuation_are_allowed():
    checks = check_sentence('Ñandú corre rápido, ¿verdad?').checks
    assert checks['starts_with_capital']
    assert checks['no_weird_patterns']


def test_single_word_fails_multiple_words_check():
    assert check_sentence('Hola').checks['multiple_words'] is False


def test_default_word_lists_are_pinned():
    assert len(COMMON_VERBS) == 134
    assert len(SUBJECT_MARKERS) == 186
    assert len(LEADING_PREPOSITIONS) == 18
    assert len(MEANINGLESS_WORDS) == 16
    assert len(INAPPROPRIATE_WORDS) == 47
    assert {'come', 'es', 'está', 'escribe'} <= COMMON_VERBS
    assert {'niña', 'casa', 'mi', 'una'} <= SUBJECT_MARKERS
    assert DEFAULT_LEXICON.blacklist == MEANINGLESS_WORDS | INAPPROPRIATE_WORDS


def test_grammatical_correctness_counts_and_examples():
    result = grammatical_correctness(['La niña come manzana. El perro corre.', 'asdf qwerty zxcvbn.', 'Hola'])

    assert result['totalSentences'] == 3
    assert result['correctSentences'] == 2
    assert result['incorrectSentences'] == 1
    assert result['percentage'] == 67
    assert result['examples'] == {
        'correct': ['La niña come manzana', 'El perro corre'],
        'incorrect': ['asdf qwerty zxcvbn'],
    }


def test_grammatical_correctness_caps_examples_at_five():
    texts = ['El gato come pescado.'] * 7
    result = grammatical_correctness(texts)
    assert result['correctSentences'] == 7
    assert len(result['examples']['correct']) == 5


def test_grammatical_correctness_of_nothing():
    assert grammatical_correctness([]) == {
        'totalSentences': 0,
        'correctSentences': 0,
        'incorrectSentences': 0,
        'percentage': 0,
        'examples': {'correct': [], 'incorrect': []},
    }


def test_guillemets_are_kept_and_count_as_weird_characters():
    assert segment_sentences('Dijo «hola» el niño.') == ['Dijo «hola» el niño']
    assert check_sentence('Dijo «hola» el niño').checks['no_weird_patterns'] is False
