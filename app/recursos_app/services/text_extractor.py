"""Pull the human-authored text fragments out of a resource's content."""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from flask import current_app

from .resource_content import (
    ComprehensionContent,
    DragAndDropContent,
    GrammarContent,
    IceBreakerContent,
    OralContent,
    ResourceKind,
    ResourceRecord,
    WritingContent,
    parse_content,
)


def _comprehension_texts(content: ComprehensionContent) -> Iterator[Optional[str]]:
    yield content.texto
    for question in content.preguntas:
        yield question.pregunta
        yield from question.opciones


def _writing_texts(content: WritingContent) -> Iterator[Optional[str]]:
    yield content.descripcion
    yield content.instrucciones
    yield content.estructura_propuesta
    yield from content.conectores
    yield from content.lista_verificacion


def _grammar_texts(content: GrammarContent) -> Iterator[Optional[str]]:
    yield content.instrucciones
    yield content.ejemplo
    for item in content.items:
        yield item.consigna
        yield item.respuesta


def _oral_texts(content: OralContent) -> Iterator[Optional[str]]:
    yield content.descripcion
    yield content.instrucciones_docente
    yield content.guion_estudiante
    yield from content.preguntas_orientadoras
    yield from content.criterios_evaluacion


def _drag_and_drop_texts(content: DragAndDropContent) -> Iterator[Optional[str]]:
    for activity in content.actividades:
        yield activity.enunciado
        yield from activity.opciones
        yield from activity.respuesta


def _ice_breaker_texts(content: IceBreakerContent) -> Iterator[Optional[str]]:
    for activity in content.actividades:
        yield activity.nombre
        yield activity.descripcion
        yield activity.instrucciones
        specific = activity.contenido_especifico
        if specific is None:
            continue
        for frase in specific.frases:
            yield frase.template
            yield from frase.ejemplos
        yield from specific.pistas


_EXTRACTORS: Dict[ResourceKind, Callable[[Any], Iterator[Optional[str]]]] = {
    ResourceKind.COMPREHENSION: _comprehension_texts,
    ResourceKind.WRITING: _writing_texts,
    ResourceKind.GRAMMAR: _grammar_texts,
    ResourceKind.ORAL: _oral_texts,
    ResourceKind.DRAG_AND_DROP: _drag_and_drop_texts,
    ResourceKind.ICE_BREAKERS: _ice_breaker_texts,
}


def extract_texts(resource: Any) -> List[str]:
    """Return the trimmed, non-empty text fragments of a resource.

    Accepts a ``Recurso`` model, a plain dict or a ``ResourceRecord``. Fields
    are visited in a fixed per-kind order; unknown kinds log a warning and
    yield nothing, and unexpected failures log an error and yield nothing.
    """
    try:
        record = ResourceRecord.from_obj(resource)
        kind = record.kind
        if kind is None:
            current_app.logger.warning('Unrecognized resource type: %r', record.tipo)
            return []

        content = parse_content(kind, record.contenido)
        texts = []
        for text in _EXTRACTORS[kind](content):
            if text and text.strip():
                texts.append(text.strip())
        return texts
    except Exception as exc:
        current_app.logger.error('Failed extracting text from resource: %s', exc)
        return []
