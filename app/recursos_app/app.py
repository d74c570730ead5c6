"""
Recursos - Flask Application
JSON API exposing the linguistic quality metrics of generated resources.
"""
import os

from flask import Flask, request, jsonify, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import config
from .models import db, Recurso, Usuario
from .services.semantic_analyzer import analyze_batch, analyze_resource
from .services.semantic_report import (
    build_dashboard_metrics,
    build_metrics_report,
    build_type_report,
    build_user_report,
)
from .utils import (
    get_recent_resources,
    get_resources,
    get_users_with_resources,
    parse_bool,
    parse_date,
    parse_id_list,
    parse_int,
)


# Initialize Flask app
app = Flask(__name__)
app.config.from_object(config[os.getenv('FLASK_ENV', 'development')])
app.json.sort_keys = False

# Initialize extensions
db.init_app(app)
CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ALLOWED_ORIGINS']}})


def _bad_request(message: str):
    return jsonify({'success': False, 'message': message}), 400


def _optional_int(value):
    return int(value) if value not in (None, '') else None


# ============================================================================
# SEMANTIC ANALYSIS
# ============================================================================

@app.route('/api/semantics/resource/<int:resource_id>')
def analyze_resource_semantics(resource_id):
    """Analyze the linguistic quality of one resource."""
    recurso = db.session.get(Recurso, resource_id)
    if recurso is None:
        current_app.logger.warning('Resource %s not found for semantic analysis', resource_id)
        return jsonify({'success': False, 'message': 'Recurso no encontrado'}), 404

    return jsonify({'success': True, 'data': analyze_resource(recurso)})


@app.route('/api/semantics/batch')
def analyze_batch_semantics():
    """Analyze several resources with optional filters."""
    args = request.args
    try:
        filters = {
            'tipo': args.get('tipo') or None,
            'usuario_id': _optional_int(args.get('usuarioId')),
            'limit': parse_int(args.get('limit'), app.config['SEMANTICS_BATCH_LIMIT'], minimum=1,
                               maximum=app.config['SEMANTICS_MAX_BATCH_LIMIT']),
            'offset': parse_int(args.get('offset'), 0),
            'fecha_desde': parse_date(args.get('fechaDesde')),
            'fecha_hasta': parse_date(args.get('fechaHasta'), end_of_day=True),
        }
    except ValueError as exc:
        return _bad_request(f'Parámetros inválidos: {exc}')

    recursos = get_resources(**filters)
    echo = {
        'tipo': filters['tipo'],
        'usuarioId': filters['usuario_id'],
        'limit': filters['limit'],
        'offset': filters['offset'],
        'fechaDesde': args.get('fechaDesde'),
        'fechaHasta': args.get('fechaHasta'),
    }

    if not recursos:
        return jsonify({
            'success': True,
            'message': 'No se encontraron recursos con los filtros especificados',
            'data': analyze_batch([]),
            'filters': echo,
        })

    return jsonify({'success': True, 'data': analyze_batch(recursos), 'filters': echo})


@app.route('/api/semantics/report')
def semantic_report():
    """Detailed report grouped by resource type."""
    args = request.args
    try:
        fecha_desde = parse_date(args.get('fechaDesde'))
        fecha_hasta = parse_date(args.get('fechaHasta'), end_of_day=True)
    except ValueError as exc:
        return _bad_request(f'Parámetros inválidos: {exc}')

    recursos = get_resources(fecha_desde=fecha_desde, fecha_hasta=fecha_hasta)
    report = build_type_report(
        recursos,
        include_examples=parse_bool(args.get('incluirEjemplos')),
        fecha_desde=args.get('fechaDesde'),
        fecha_hasta=args.get('fechaHasta'),
    )

    payload = {'success': True, 'data': report}
    if not recursos:
        payload['message'] = 'No se encontraron recursos en el período especificado'
    return jsonify(payload)


@app.route('/api/semantics/users')
def available_users():
    """List users that own at least one resource."""
    users = get_users_with_resources()
    return jsonify({'success': True, 'data': {'users': users, 'totalUsers': len(users)}})


@app.route('/api/semantics/user/<int:user_id>/report')
def user_resources_report(user_id):
    """Quality summary of one user's resources."""
    usuario = db.session.get(Usuario, user_id)
    recursos = get_resources(usuario_id=user_id)
    return jsonify({'success': True, 'data': build_user_report(usuario, user_id, recursos)})


# ============================================================================
# METRICS
# ============================================================================

@app.route('/api/metrics/resource/<int:resource_id>')
def resource_metrics(resource_id):
    """Metrics of one resource, optionally restricted to an owner."""
    try:
        usuario_id = _optional_int(request.args.get('usuarioId'))
    except ValueError as exc:
        return _bad_request(f'Parámetros inválidos: {exc}')

    recurso = db.session.get(Recurso, resource_id)
    if recurso is None or (usuario_id is not None and recurso.usuario_id != usuario_id):
        current_app.logger.warning('Resource %s not found for metrics', resource_id)
        return jsonify({'success': False, 'message': 'Recurso no encontrado'}), 404

    return jsonify({
        'success': True,
        'message': 'Análisis semántico completado',
        'analysis': analyze_resource(recurso),
    })


@app.route('/api/metrics/batch')
def batch_metrics():
    """Metrics of a hand-picked set of resources (``resourceIds=1,2,3``)."""
    args = request.args
    try:
        usuario_id = _optional_int(args.get('usuarioId'))
        limit = parse_int(args.get('limit'), app.config['METRICS_BATCH_LIMIT'], minimum=1,
                          maximum=app.config['METRICS_MAX_BATCH_LIMIT'])
    except ValueError as exc:
        return _bad_request(f'Parámetros inválidos: {exc}')

    recursos = get_resources(
        ids=parse_id_list(args.get('resourceIds')),
        tipo=args.get('resourceType') or None,
        usuario_id=usuario_id,
        limit=limit,
    )
    if not recursos:
        return jsonify({'success': False, 'message': 'No se encontraron recursos para analizar'}), 404

    return jsonify({
        'success': True,
        'message': f'Análisis semántico completado para {len(recursos)} recursos',
        'analysis': analyze_batch(recursos),
    })


@app.route('/api/metrics/report')
def metrics_report():
    """Report over the last N days with interpretations and recommendations."""
    args = request.args
    try:
        period = parse_int(args.get('period'), app.config['DEFAULT_REPORT_PERIOD_DAYS'], minimum=1)
        usuario_id = _optional_int(args.get('usuarioId'))
    except ValueError as exc:
        return _bad_request(f'Parámetros inválidos: {exc}')

    recursos = get_recent_resources(
        period,
        tipo=args.get('resourceType') or None,
        usuario_id=usuario_id,
        limit=app.config['METRICS_REPORT_LIMIT'],
    )
    report = build_metrics_report(recursos, period)

    payload = {'success': True, 'report': report}
    if not recursos:
        payload['message'] = 'No se encontraron recursos en el período especificado'
    return jsonify(payload)


@app.route('/api/metrics/dashboard')
def dashboard_metrics():
    """Quick metrics over the most recent resources."""
    try:
        usuario_id = _optional_int(request.args.get('usuarioId'))
    except ValueError as exc:
        return _bad_request(f'Parámetros inválidos: {exc}')

    recursos = get_resources(usuario_id=usuario_id, limit=app.config['DASHBOARD_RESOURCE_LIMIT'])
    return jsonify({'success': True, 'metrics': build_dashboard_metrics(recursos)})


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.errorhandler(404)
def not_found(error):
    """404 error handler."""
    return jsonify({'success': False, 'message': 'Recurso no encontrado'}), 404


@app.errorhandler(Exception)
def internal_error(error):
    """JSON error handler for unexpected failures."""
    if isinstance(error, HTTPException):
        return jsonify({'success': False, 'message': error.description}), error.code
    current_app.logger.error('Unhandled error: %s', error)
    db.session.rollback()
    return jsonify({'success': False, 'message': 'Error interno del servidor', 'error': str(error)}), 500


# ============================================================================
# INITIALIZATION
# ============================================================================

def init_database():
    """Create the database tables."""
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    init_database()
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', 1111)), debug=app.config['DEBUG'])
