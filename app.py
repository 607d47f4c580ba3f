#!/usr/bin/env python3

import os
import logging
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from werkzeug.exceptions import HTTPException
from config import get_config
from playtime.tracker import PlaytimeTracker


def _wants_json():
    return request.path.startswith('/api/')


def create_app(config_name=None, toml_config=None):
    """Application factory pattern"""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(get_config(config_name, toml_config))

    # Configure logging
    if not app.debug and not app.testing:
        log_file = app.config['APP_LOG_FILE']
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.setLevel(logging.INFO)
        app.logger.info('Playtime Tracker startup')

    app.extensions['playtime'] = PlaytimeTracker(
        app.config['LOG_DIRECTORY'],
        patterns=app.config['LOG_PATTERNS'],
        workers=app.config['SCAN_WORKERS']
    )

    # Register error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        if _wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        app.logger.error(f'HTTP Error {error.code}: {error.description}')
        if _wants_json():
            return jsonify({'error': error.description}), error.code
        return render_template('errors/generic.html',
                               error_code=error.code,
                               error_message=error.description), error.code

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.error(f'Unhandled exception: {error}', exc_info=True)
        if _wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('errors/500.html'), 500

    # Context processors
    @app.context_processor
    def inject_common_vars():
        return {
            'current_year': datetime.now().year,
            'app_name': 'Minecraft Playtime Tracker'
        }

    # Register routes
    from routes import main_bp
    app.register_blueprint(main_bp)

    return app


def main():
    """Entry point for running the application"""
    config_name = os.environ.get('FLASK_ENV', 'production')
    app = create_app(config_name)

    host = app.config.get('HOST', '127.0.0.1')
    port = app.config.get('PORT', 8080)
    debug = app.config.get('DEBUG', False)

    print(f"🚀 Starting Minecraft Playtime Tracker on http://{host}:{port}")
    print(f"Debug mode: {debug}")
    print(f"Environment: {config_name}")
    print(f"Log directory: {app.config['LOG_DIRECTORY']}")

    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
