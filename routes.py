from flask import Blueprint, render_template, jsonify, current_app, Response
from playtime.errors import LogSourceError
from playtime.report import export_player, export_registry, format_report, duration_hhmmss

# Create blueprint
main_bp = Blueprint('main', __name__)


def get_tracker():
    return current_app.extensions['playtime']


def _source_error(error):
    current_app.logger.error(f'Player log scan failed: {error}')
    return jsonify({
        'success': False,
        'error': f'Failed to read player logs: {error}'
    }), 500


@main_bp.route('/')
def index():
    """Playtime overview page"""
    try:
        registry = get_tracker().registry
    except LogSourceError as e:
        current_app.logger.error(f'Dashboard error: {e}')
        return render_template('index.html', players=[], error=str(e)), 500

    players = registry.snapshot()
    return render_template(
        'index.html',
        players=[players[name] for name in registry],
        format_duration=duration_hhmmss,
        error=None
    )


@main_bp.route('/api/players')
def list_players():
    """API endpoint for all reconstructed player sessions"""
    try:
        registry = get_tracker().registry
    except LogSourceError as e:
        return _source_error(e)
    return jsonify(export_registry(registry))


@main_bp.route('/api/players/<name>')
def get_player(name):
    """API endpoint for a single player's days and sessions"""
    try:
        registry = get_tracker().registry
    except LogSourceError as e:
        return _source_error(e)

    player_data = registry.get(name)
    if player_data is None:
        return jsonify({'success': False, 'error': f"Player '{name}' not found in logs"}), 404
    return jsonify(export_player(player_data))


@main_bp.route('/api/report')
def text_report():
    """Plain text playtime report"""
    try:
        registry = get_tracker().registry
    except LogSourceError as e:
        return _source_error(e)
    return Response(format_report(registry) + '\n', mimetype='text/plain')


@main_bp.route('/api/rescan', methods=['POST'])
def rescan():
    """Re-read all player logs and rebuild sessions"""
    tracker = get_tracker()
    try:
        registry = tracker.rescan()
    except LogSourceError as e:
        return _source_error(e)

    current_app.logger.info(f'Rescan complete: {len(registry)} players')
    return jsonify({'success': True, **tracker.last_scan})
