import logging

import pytest

from app.recursos_app.services.resource_content import ResourceKind, ResourceRecord
from app.recursos_app.services.text_extractor import extract_texts


def test_grammar_fields_in_traversal_order(grammar_resource):
    assert extract_texts(grammar_resource) == [
        'Escribe una oración.',
        'La niña come manzana.',
        'Completa:',
        'Mi casa es bonita.',
    ]


def test_comprehension_text_questions_and_options(comprehension_resource):
    assert extract_texts(comprehension_resource) == [
        'El perro corre en el parque. La niña juega con el perro.',
        '¿Dónde corre el perro?',
        'En el parque',
        'En la casa',
    ]


def test_writing_fields():
    resource = {
        'tipo': 'escritura',
        'contenido': {
            'descripcion': 'Una carta a un amigo.',
            'instrucciones': 'Escribe una carta.',
            'estructuraPropuesta': 'Saludo, cuerpo y despedida.',
            'conectores': ['además', 'sin embargo'],
            'listaVerificacion': ['Usa mayúsculas.', 'Revisa la ortografía.'],
        },
    }
    assert extract_texts(resource) == [
        'Una carta a un amigo.',
        'Escribe una carta.',
        'Saludo, cuerpo y despedida.',
        'además',
        'sin embargo',
        'Usa mayúsculas.',
        'Revisa la ortografía.',
    ]


def test_oral_fields():
    resource = {
        'tipo': 'oral',
        'contenido': {
            'descripcion': 'Presentación personal.',
            'instruccionesDocente': 'Forma parejas.',
            'guionEstudiante': 'Hola, me llamo Ana.',
            'preguntasOrientadoras': ['¿Cómo te llamas?'],
            'criteriosEvaluacion': ['Pronunciación clara'],
        },
    }
    assert extract_texts(resource) == [
        'Presentación personal.',
        'Forma parejas.',
        'Hola, me llamo Ana.',
        '¿Cómo te llamas?',
        'Pronunciación clara',
    ]


def test_drag_and_drop_activities():
    resource = {
        'type': 'drag-and-drop',
        'content': {
            'actividades': [
                {'enunciado': 'El gato ___ leche.', 'opciones': ['bebe', 'come'], 'respuesta': ['bebe']},
                {'enunciado': 'Ordena la frase.'},
            ],
        },
    }
    assert extract_texts(resource) == ['El gato ___ leche.', 'bebe', 'come', 'bebe', 'Ordena la frase.']


def test_ice_breakers_with_and_without_specific_content():
    resource = {
        'tipo': 'ice_breakers',
        'contenido': {
            'actividades': [
                {
                    'nombre': 'Adivina quién',
                    'descripcion': 'Juego de pistas.',
                    'instrucciones': 'Lee las pistas en voz alta.',
                    'contenidoEspecifico': {
                        'frases': [{'template': 'Me gusta ___', 'ejemplos': ['Me gusta leer']}],
                        'pistas': ['Tiene cuatro patas'],
                    },
                },
                {'nombre': 'Ronda rápida'},
            ],
        },
    }
    assert extract_texts(resource) == [
        'Adivina quién',
        'Juego de pistas.',
        'Lee las pistas en voz alta.',
        'Me gusta ___',
        'Me gusta leer',
        'Tiene cuatro patas',
        'Ronda rápida',
    ]


def test_blank_and_non_string_values_are_skipped_and_trimmed():
    resource = {
        'tipo': 'gramatica',
        'contenido': {
            'instrucciones': '   ',
            'ejemplo': '  El sol brilla.  ',
            'items': [{'consigna': 12, 'respuesta': None}, 'not a record', {'respuesta': 'Sí.'}],
        },
    }
    assert extract_texts(resource) == ['El sol brilla.', 'Sí.']


def test_wrong_container_types_degrade_to_nothing():
    resource = {'tipo': 'comprension', 'contenido': {'texto': 'Hola a todos.', 'preguntas': 'oops'}}
    assert extract_texts(resource) == ['Hola a todos.']


@pytest.mark.parametrize('tipo', [kind.value for kind in ResourceKind])
def test_empty_content_yields_nothing_for_every_kind(tipo):
    assert extract_texts({'tipo': tipo, 'contenido': {}}) == []


def test_unrecognized_type_logs_warning(caplog):
    with caplog.at_level(logging.WARNING):
        texts = extract_texts({'tipo': 'podcast', 'contenido': {'texto': 'Hola mundo.'}})

    assert texts == []
    assert any('Unrecognized resource type' in record.getMessage() for record in caplog.records)


def test_unexpected_failure_returns_empty_list(caplog):
    class BrokenContent(dict):
        def get(self, *args, **kwargs):
            raise RuntimeError('boom')

    with caplog.at_level(logging.ERROR):
        texts = extract_texts({'tipo': 'oral', 'contenido': BrokenContent()})

    assert texts == []
    assert any('boom' in record.getMessage() for record in caplog.records)


def test_extraction_is_idempotent(comprehension_resource):
    assert extract_texts(comprehension_resource) == extract_texts(comprehension_resource)


def test_model_like_objects_are_accepted():
    class Recurso:
        id = 3
        titulo = 'Modelo'
        tipo = 'gramatica'
        contenido = {'ejemplo': 'El niño lee un libro.'}
        created_at = None

    record = ResourceRecord.from_obj(Recurso())
    assert record.kind is ResourceKind.GRAMMAR
    assert extract_texts(Recurso()) == ['El niño lee un libro.']


@pytest.mark.parametrize('tag,kind', [
    ('comprehension', ResourceKind.COMPREHENSION),
    ('Writing', ResourceKind.WRITING),
    ('grammar', ResourceKind.GRAMMAR),
    ('drag-and-drop', ResourceKind.DRAG_AND_DROP),
    ('ice-breakers', ResourceKind.ICE_BREAKERS),
    ('oral', ResourceKind.ORAL),
    ('podcast', None),
    (None, None),
])
def test_kind_aliases(tag, kind):
    assert ResourceKind.parse(tag) is kind
