"""Closed Spanish word lists used by the grammaticality heuristic.

The lists are fixed data. ``GrammarLexicon`` bundles them so callers (and
tests) can pass a substitute lexicon to the heuristic instead of relying on
module globals.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple


COMMON_VERBS: FrozenSet[str] = frozenset({
    'es', 'son', 'está', 'están', 'tiene', 'tienen', 'hace', 'hacen', 'va', 'van',
    'viene', 'vienen', 'dice', 'dicen', 'puede', 'pueden', 'debe', 'deben',
    'quiere', 'quieren', 'come', 'comen', 'vive', 'viven', 'juega', 'juegan',
    'estudia', 'estudian', 'trabaja', 'trabajan', 'duerme', 'duermen', 'canta',
    'cantan', 'baila', 'bailan', 'lee', 'leen', 'escribe', 'escriben', 'habla',
    'hablan', 'camina', 'caminan', 'corre', 'corren', 'salta', 'saltan', 'ríe',
    'ríen', 'llora', 'lloran', 'ama', 'aman', 'cuida', 'cuidan', 'enseña',
    'enseñan', 'aprende', 'aprenden', 'mira', 'miran', 'escucha', 'escuchan',
    'toca', 'tocan', 'abraza', 'abrazan', 'besa', 'besan', 'ayuda', 'ayudan',
    'cocina', 'cocinan', 'limpia', 'limpian', 'guarda', 'guardan', 'abre',
    'abren', 'cierra', 'cierran', 'encuentra', 'encuentran', 'busca', 'buscan',
    'da', 'dan', 'recibe', 'reciben', 'trae', 'traen', 'lleva', 'llevan', 'pone',
    'ponen', 'saca', 'sacan', 'compra', 'compran', 'vende', 'venden', 'gana',
    'ganan', 'pierde', 'pierden', 'gusta', 'gustan', 'sirve', 'sirven',
    'funciona', 'funcionan', 'empieza', 'empiezan', 'termina', 'terminan',
    'continúa', 'continúan', 'para', 'paran', 'sigue', 'siguen', 'regresa',
    'regresan', 'llega', 'llegan', 'sale', 'salen', 'entra', 'entran', 'sube',
    'suben', 'baja', 'bajan',
})

# Articles, determiners, pronouns and everyday nouns/adjectives that signal a
# subject is present.
SUBJECT_MARKERS: FrozenSet[str] = frozenset({
    'el', 'la', 'los', 'las', 'un', 'una', 'unos', 'unas', 'mi', 'tu', 'su',
    'nuestro', 'nuestra', 'yo', 'tú', 'él', 'ella', 'nosotros', 'nosotras',
    'ellos', 'ellas', 'este', 'esta', 'estos', 'estas', 'ese', 'esa', 'esos',
    'esas', 'aquel', 'aquella', 'aquellos', 'aquellas',
    'niño', 'niña', 'niños', 'niñas', 'mamá', 'papá', 'hermano', 'hermana',
    'abuelo', 'abuela', 'maestro', 'maestra', 'doctor', 'doctora', 'perro',
    'gato', 'gata', 'casa', 'escuela', 'familia', 'amigo', 'amiga', 'libro',
    'mesa', 'silla', 'árbol', 'flor', 'sol', 'luna', 'agua', 'comida', 'juego',
    'película', 'música', 'canción', 'baile', 'fiesta', 'regalo', 'cumpleaños',
    'vacaciones', 'parque', 'playa', 'montaña', 'ciudad', 'pueblo', 'carro',
    'bicicleta', 'avión', 'tren', 'teléfono', 'computadora', 'televisión',
    'radio', 'reloj', 'zapatos', 'ropa', 'camisa', 'pantalón', 'vestido',
    'sombrero', 'pelota', 'muñeca', 'juguete', 'animal', 'pájaro', 'pez',
    'caballo', 'vaca', 'pollo', 'cerdo', 'ratón', 'elefante', 'león', 'tigre',
    'oso', 'mono', 'conejo', 'tortuga', 'serpiente', 'araña', 'mariposa',
    'abeja', 'hormiga', 'mosca',
    'color', 'rojo', 'azul', 'verde', 'amarillo', 'negro', 'blanco', 'rosa',
    'morado', 'naranja', 'café', 'grande', 'pequeño', 'alto', 'bajo', 'gordo',
    'flaco', 'bonito', 'feo', 'bueno', 'malo', 'feliz', 'triste', 'alegre',
    'enojado', 'cansado', 'despierto', 'dormido', 'limpio', 'sucio', 'nuevo',
    'viejo', 'caliente', 'frío', 'dulce', 'salado', 'rico', 'sabroso', 'fácil',
    'difícil', 'rápido', 'lento', 'fuerte', 'débil',
    'cerca', 'lejos', 'arriba', 'abajo', 'dentro', 'fuera', 'aquí', 'allí',
    'hoy', 'ayer', 'mañana', 'temprano', 'tarde', 'noche', 'día', 'semana',
    'mes', 'año', 'lunes', 'martes', 'miércoles', 'jueves', 'viernes',
    'sábado', 'domingo',
})

LEADING_PREPOSITIONS: FrozenSet[str] = frozenset({
    'en', 'de', 'con', 'por', 'para', 'sin', 'sobre', 'bajo', 'entre', 'desde',
    'hasta', 'durante', 'mediante', 'según', 'contra', 'hacia', 'ante', 'tras',
})

ARTICLE_CLASHES: FrozenSet[Tuple[str, str]] = frozenset({
    ('el', 'la'), ('la', 'el'),
    ('un', 'una'), ('una', 'un'),
    ('los', 'las'), ('las', 'los'),
})

MEANINGLESS_WORDS: FrozenSet[str] = frozenset({
    'nada', 'na', 'x', 'xx', 'xxx', 'asdf', 'qwerty', 'aaa', 'bbb', 'ccc',
    'qwertryuja', 'test', 'prueba', 'asdasd', 'sdfsdf', 'zxcvbn',
})

INAPPROPRIATE_WORDS: FrozenSet[str] = frozenset({
    # Spanish
    'alcohol', 'caca', 'cannabis', 'cocaína', 'cojones', 'coño', 'culo',
    'drogas', 'follar', 'heroína', 'hostia', 'joder', 'mierda', 'muerte',
    'pene', 'picha', 'pito', 'polla', 'porno', 'prostituta', 'puta', 'puto',
    'sexo', 'tetas', 'vagina', 'violar', 'violencia',
    # English
    'ass', 'bitch', 'cocaine', 'cock', 'cunt', 'dick', 'drugs', 'fuck',
    'heroin', 'kill', 'murder', 'penis', 'piss', 'porn', 'prostitute', 'pussy',
    'sex', 'shit', 'tits', 'violence',
})


@dataclass(frozen=True)
class GrammarLexicon:
    verbs: FrozenSet[str] = COMMON_VERBS
    subjects: FrozenSet[str] = SUBJECT_MARKERS
    prepositions: FrozenSet[str] = LEADING_PREPOSITIONS
    article_clashes: FrozenSet[Tuple[str, str]] = ARTICLE_CLASHES
    blacklist: FrozenSet[str] = MEANINGLESS_WORDS | INAPPROPRIATE_WORDS


DEFAULT_LEXICON = GrammarLexicon()
