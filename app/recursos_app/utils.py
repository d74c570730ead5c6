"""Query and request-argument helpers for the Flask application."""
from datetime import datetime, time, timedelta, timezone
from typing import List, Optional

from sqlalchemy import func

from .models import db, Recurso, Usuario


def parse_date(value: Optional[str], end_of_day: bool = False) -> Optional[datetime]:
    """Parse a YYYY-MM-DD (or ISO) date query argument, converted to UTC.

    Naive values are taken as UTC. Raises ValueError on malformed input so
    routes can answer 400.
    """
    if not value:
        return None
    parsed = datetime.fromisoformat(value.strip())
    if end_of_day and len(value.strip()) == 10:
        parsed = datetime.combine(parsed.date(), time.max)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    # stored timestamps compare as naive UTC
    return parsed.astimezone(timezone.utc)


def parse_id_list(value: Optional[str]) -> List[int]:
    """Parse a comma separated id list, skipping entries that are not integers."""
    ids = []
    for part in (value or '').split(','):
        try:
            ids.append(int(part.strip()))
        except ValueError:
            continue
    return ids


def parse_int(value: Optional[str], default: int, minimum: int = 0, maximum: Optional[int] = None) -> int:
    """Parse an integer query argument, clamped to [minimum, maximum]."""
    if value is None or value == '':
        result = default
    else:
        result = int(value)
    result = max(minimum, result)
    if maximum is not None:
        result = min(maximum, result)
    return result


def parse_bool(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in {'1', 'true', 'yes', 'y'}


def get_resources(
    tipo: Optional[str] = None,
    usuario_id: Optional[int] = None,
    fecha_desde: Optional[datetime] = None,
    fecha_hasta: Optional[datetime] = None,
    limit: Optional[int] = None,
    offset: int = 0,
    ids: Optional[List[int]] = None,
) -> List[Recurso]:
    """Get resources matching the filters, newest first.

    An empty ``ids`` list means no id filter.
    """
    query = Recurso.query
    if ids:
        query = query.filter(Recurso.id.in_(ids))
    if tipo:
        query = query.filter(Recurso.tipo == tipo)
    if usuario_id is not None:
        query = query.filter(Recurso.usuario_id == usuario_id)
    if fecha_desde is not None:
        query = query.filter(Recurso.created_at >= fecha_desde)
    if fecha_hasta is not None:
        query = query.filter(Recurso.created_at <= fecha_hasta)

    query = query.order_by(Recurso.created_at.desc(), Recurso.id.desc())
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_recent_resources(days: int, tipo: Optional[str] = None,
                         usuario_id: Optional[int] = None, limit: Optional[int] = None) -> List[Recurso]:
    """Get resources created within the last ``days`` days."""
    since = datetime.now(timezone.utc) - timedelta(days=days)
    return get_resources(tipo=tipo, usuario_id=usuario_id, fecha_desde=since, limit=limit)


def get_users_with_resources():
    """Get users owning at least one resource, with their resource count."""
    results = db.session.query(
        Usuario,
        func.count(Recurso.id)
    ).join(
        Recurso, Recurso.usuario_id == Usuario.id
    ).group_by(Usuario.id).order_by(Usuario.id).all()

    return [
        {**user.to_dict(), 'totalResources': count}
        for user, count in results
    ]
