#!/usr/bin/env python3

"""
Development runner - HTTP only, debug mode on
For production use a WSGI server like gunicorn
"""

import os
from app import create_app


def main():
    """Run the app in debug mode for development"""
    config_name = os.environ.get('FLASK_ENV', 'development')
    app = create_app(config_name)

    host = app.config.get('HOST', '127.0.0.1')
    port = app.config.get('PORT', 8080)
    debug = True  # Force debug mode for development

    print("=" * 50)
    print("DEVELOPMENT SERVER")
    print("=" * 50)
    print(f"Starting Minecraft Playtime Tracker on http://{host}:{port}")
    print(f"Debug mode: {debug}")
    print(f"Environment: {config_name}")
    print(f"Log directory: {app.config['LOG_DIRECTORY']}")
    print("=" * 50)

    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
