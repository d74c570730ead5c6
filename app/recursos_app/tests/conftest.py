import os
import sys
from pathlib import Path

import pytest
from flask import Flask

# Ensure repository root is importable when pytest changes working dir
ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

os.environ.setdefault('FLASK_ENV', 'testing')


@pytest.fixture(autouse=True)
def app_context():
    app = Flask(__name__)
    with app.app_context():
        yield


@pytest.fixture
def grammar_resource():
    return {
        'id': 7,
        'titulo': 'Oraciones simples',
        'type': 'grammar',
        'content': {
            'instrucciones': 'Escribe una oración.',
            'ejemplo': 'La niña come manzana.',
            'items': [{'consigna': 'Completa:', 'respuesta': 'Mi casa es bonita.'}],
        },
        'createdAt': '2024-03-01T10:00:00+00:00',
    }


@pytest.fixture
def comprehension_resource():
    return {
        'id': 1,
        'titulo': 'El perro del parque',
        'tipo': 'comprension',
        'contenido': {
            'texto': 'El perro corre en el parque. La niña juega con el perro.',
            'preguntas': [
                {'pregunta': '¿Dónde corre el perro?', 'opciones': ['En el parque', 'En la casa']},
            ],
        },
    }
