"""SQLAlchemy database models for users and their generated resources."""
from datetime import datetime, timezone
import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()

RESOURCE_TYPES = ('comprension', 'escritura', 'gramatica', 'oral', 'drag_and_drop', 'ice_breakers')


@event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite connections for better concurrency."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL;")
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.execute("PRAGMA busy_timeout=15000;")
        cursor.close()


def utcnow():
    """Get current UTC time."""
    return datetime.now(timezone.utc)


class Usuario(db.Model):
    """User account owning generated resources."""
    __tablename__ = 'usuarios'

    id = db.Column(db.Integer, primary_key=True, index=True)
    nombre = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, index=True, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    recursos = db.relationship('Recurso', back_populates='usuario', cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Usuario {self.email}>'

    def to_dict(self):
        return {
            'id': self.id,
            'nombre': self.nombre,
            'email': self.email,
        }


class Recurso(db.Model):
    """Generated educational resource; ``contenido`` shape depends on ``tipo``."""
    __tablename__ = 'recursos'

    id = db.Column(db.Integer, primary_key=True, index=True)
    usuario_id = db.Column(db.Integer, db.ForeignKey('usuarios.id', ondelete='CASCADE'), nullable=False, index=True)
    tipo = db.Column(db.String(50), nullable=False, index=True)
    titulo = db.Column(db.String(255), nullable=False)
    contenido = db.Column(db.JSON, nullable=False, default=dict)
    meta = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    usuario = db.relationship('Usuario', back_populates='recursos')

    def __repr__(self):
        return f'<Recurso {self.id} {self.tipo}>'

    def to_dict(self):
        """Convert resource to dictionary."""
        return {
            'id': self.id,
            'usuarioId': self.usuario_id,
            'tipo': self.tipo,
            'titulo': self.titulo,
            'contenido': self.contenido,
            'meta': self.meta,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
