"""Resource kinds and the typed content schema of each kind.

Resources are stored with a free-form JSON ``contenido`` column whose shape is
fixed by the ``tipo`` tag. Each kind gets a frozen dataclass parsed leniently
from that JSON: missing keys, wrong container types and non-string leaves are
dropped instead of raising, so extraction never has to probe the raw dict.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class ResourceKind(str, Enum):
    """Closed set of resource categories, valued by their stored tag."""

    COMPREHENSION = 'comprension'
    WRITING = 'escritura'
    GRAMMAR = 'gramatica'
    ORAL = 'oral'
    DRAG_AND_DROP = 'drag_and_drop'
    ICE_BREAKERS = 'ice_breakers'

    @classmethod
    def parse(cls, tag: Any) -> Optional['ResourceKind']:
        """Resolve a stored or English tag to a kind, or None if unknown."""
        if not isinstance(tag, str):
            return None
        key = tag.strip().lower().replace('-', '_').replace(' ', '_')
        return _KIND_ALIASES.get(key)


_KIND_ALIASES: Dict[str, ResourceKind] = {kind.value: kind for kind in ResourceKind}
_KIND_ALIASES.update({
    'comprehension': ResourceKind.COMPREHENSION,
    'comprensión': ResourceKind.COMPREHENSION,
    'writing': ResourceKind.WRITING,
    'grammar': ResourceKind.GRAMMAR,
    'gramática': ResourceKind.GRAMMAR,
    'dragdrop': ResourceKind.DRAG_AND_DROP,
    'icebreakers': ResourceKind.ICE_BREAKERS,
})


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _texts(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _records(value: Any) -> Tuple[Mapping[str, Any], ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, Mapping))


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


# ---------------------------------------------------------------------------
# Comprehension

@dataclass(frozen=True)
class ComprehensionQuestion:
    pregunta: Optional[str] = None
    opciones: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ComprehensionContent:
    texto: Optional[str] = None
    preguntas: Tuple[ComprehensionQuestion, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ComprehensionContent':
        return cls(
            texto=_text(data.get('texto')),
            preguntas=tuple(
                ComprehensionQuestion(
                    pregunta=_text(item.get('pregunta')),
                    opciones=_texts(item.get('opciones')),
                )
                for item in _records(data.get('preguntas'))
            ),
        )


# ---------------------------------------------------------------------------
# Writing

@dataclass(frozen=True)
class WritingContent:
    descripcion: Optional[str] = None
    instrucciones: Optional[str] = None
    estructura_propuesta: Optional[str] = None
    conectores: Tuple[str, ...] = ()
    lista_verificacion: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'WritingContent':
        return cls(
            descripcion=_text(data.get('descripcion')),
            instrucciones=_text(data.get('instrucciones')),
            estructura_propuesta=_text(data.get('estructuraPropuesta')),
            conectores=_texts(data.get('conectores')),
            lista_verificacion=_texts(data.get('listaVerificacion')),
        )


# ---------------------------------------------------------------------------
# Grammar

@dataclass(frozen=True)
class GrammarItem:
    consigna: Optional[str] = None
    respuesta: Optional[str] = None


@dataclass(frozen=True)
class GrammarContent:
    instrucciones: Optional[str] = None
    ejemplo: Optional[str] = None
    items: Tuple[GrammarItem, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GrammarContent':
        return cls(
            instrucciones=_text(data.get('instrucciones')),
            ejemplo=_text(data.get('ejemplo')),
            items=tuple(
                GrammarItem(
                    consigna=_text(item.get('consigna')),
                    respuesta=_text(item.get('respuesta')),
                )
                for item in _records(data.get('items'))
            ),
        )


# ---------------------------------------------------------------------------
# Oral communication

@dataclass(frozen=True)
class OralContent:
    descripcion: Optional[str] = None
    instrucciones_docente: Optional[str] = None
    guion_estudiante: Optional[str] = None
    preguntas_orientadoras: Tuple[str, ...] = ()
    criterios_evaluacion: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'OralContent':
        return cls(
            descripcion=_text(data.get('descripcion')),
            instrucciones_docente=_text(data.get('instruccionesDocente')),
            guion_estudiante=_text(data.get('guionEstudiante')),
            preguntas_orientadoras=_texts(data.get('preguntasOrientadoras')),
            criterios_evaluacion=_texts(data.get('criteriosEvaluacion')),
        )


# ---------------------------------------------------------------------------
# Drag and drop

@dataclass(frozen=True)
class DragAndDropActivity:
    enunciado: Optional[str] = None
    opciones: Tuple[str, ...] = ()
    respuesta: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DragAndDropContent:
    actividades: Tuple[DragAndDropActivity, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DragAndDropContent':
        return cls(
            actividades=tuple(
                DragAndDropActivity(
                    enunciado=_text(item.get('enunciado')),
                    opciones=_texts(item.get('opciones')),
                    respuesta=_texts(item.get('respuesta')),
                )
                for item in _records(data.get('actividades'))
            ),
        )


# ---------------------------------------------------------------------------
# Ice breakers

@dataclass(frozen=True)
class PhraseTemplate:
    template: Optional[str] = None
    ejemplos: Tuple[str, ...] = ()


@dataclass(frozen=True)
class IceBreakerSpecificContent:
    frases: Tuple[PhraseTemplate, ...] = ()
    pistas: Tuple[str, ...] = ()


@dataclass(frozen=True)
class IceBreakerActivity:
    nombre: Optional[str] = None
    descripcion: Optional[str] = None
    instrucciones: Optional[str] = None
    contenido_especifico: Optional[IceBreakerSpecificContent] = None


@dataclass(frozen=True)
class IceBreakerContent:
    actividades: Tuple[IceBreakerActivity, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'IceBreakerContent':
        activities = []
        for item in _records(data.get('actividades')):
            specific = None
            if isinstance(item.get('contenidoEspecifico'), Mapping):
                raw = item['contenidoEspecifico']
                specific = IceBreakerSpecificContent(
                    frases=tuple(
                        PhraseTemplate(
                            template=_text(frase.get('template')),
                            ejemplos=_texts(frase.get('ejemplos')),
                        )
                        for frase in _records(raw.get('frases'))
                    ),
                    pistas=_texts(raw.get('pistas')),
                )
            activities.append(IceBreakerActivity(
                nombre=_text(item.get('nombre')),
                descripcion=_text(item.get('descripcion')),
                instrucciones=_text(item.get('instrucciones')),
                contenido_especifico=specific,
            ))
        return cls(actividades=tuple(activities))


CONTENT_SCHEMAS = {
    ResourceKind.COMPREHENSION: ComprehensionContent,
    ResourceKind.WRITING: WritingContent,
    ResourceKind.GRAMMAR: GrammarContent,
    ResourceKind.ORAL: OralContent,
    ResourceKind.DRAG_AND_DROP: DragAndDropContent,
    ResourceKind.ICE_BREAKERS: IceBreakerContent,
}


def parse_content(kind: ResourceKind, raw: Any):
    """Parse raw stored content into the schema of ``kind``."""
    return CONTENT_SCHEMAS[kind].from_dict(_mapping(raw))


# ---------------------------------------------------------------------------
# Resource record

def _pick(source: Any, *names: str) -> Any:
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return None


@dataclass(frozen=True)
class ResourceRecord:
    """Read-only view of a stored resource, independent of the ORM."""

    id: Any = None
    titulo: Optional[str] = None
    tipo: Optional[str] = None
    contenido: Any = field(default=None, compare=False)
    created_at: Any = None

    @property
    def kind(self) -> Optional[ResourceKind]:
        return ResourceKind.parse(self.tipo)

    @classmethod
    def from_obj(cls, source: Any) -> 'ResourceRecord':
        """Build a record from a ``Recurso`` model, a dict or a record."""
        if isinstance(source, cls):
            return source
        return cls(
            id=_pick(source, 'id'),
            titulo=_pick(source, 'titulo', 'title'),
            tipo=_pick(source, 'tipo', 'type'),
            contenido=_pick(source, 'contenido', 'content'),
            created_at=_pick(source, 'created_at', 'createdAt'),
        )

    def info(self, with_created_at: bool = True) -> Dict[str, Any]:
        """``resourceInfo`` block shared by analysis results."""
        info: Dict[str, Any] = {'id': self.id, 'titulo': self.titulo, 'tipo': self.tipo}
        if with_created_at:
            created = self.created_at
            info['createdAt'] = created.isoformat() if isinstance(created, datetime) else created
        return info
