#!/usr/bin/env python3

import os
import toml
from typing import Dict, Any, Optional

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'config.toml')


def load_toml_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from config.toml file"""
    if config_path is None:
        config_path = os.environ.get('PLAYTIME_CONFIG', DEFAULT_CONFIG_PATH)

    if not os.path.exists(config_path):
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please copy config.toml.example to config.toml and customize it for your environment."
        )

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return toml.load(f)
    except Exception as e:
        raise RuntimeError(f"Failed to load configuration from {config_path}: {e}")


def create_flask_config(toml_config: Dict[str, Any]) -> Dict[str, Any]:
    """Convert TOML config to Flask configuration format"""
    logs_config = toml_config.get('logs', {})
    web_config = toml_config.get('web', {})

    return {
        # Logs
        'LOG_DIRECTORY': logs_config.get('directory', 'logs'),
        'LOG_PATTERNS': list(logs_config.get('patterns', ['*.log.gz', '*.log'])),
        'SCAN_WORKERS': logs_config.get('workers', 4),

        # Web interface
        'HOST': web_config.get('host', '127.0.0.1'),
        'PORT': web_config.get('port', 8080),
        'SECRET_KEY': web_config.get('secret_key', 'change-this-to-a-random-secret-key'),
        'DEBUG': web_config.get('debug', False),
        'APP_LOG_FILE': web_config.get('log_file', 'logs/playtime_web.log'),
    }


class DevelopmentConfig:
    """Development configuration"""
    DEBUG = True


class ProductionConfig:
    """Production configuration"""
    DEBUG = False


class TestingConfig:
    """Testing configuration"""
    TESTING = True
    DEBUG = True


# Configuration dictionary for Flask factory pattern
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name: str, toml_config: Optional[Dict[str, Any]] = None) -> type:
    """
    Build the config class for an environment.
    TOML values are applied first, then the environment's own overrides.
    """
    if toml_config is None:
        toml_config = load_toml_config()

    base = config.get(config_name, config['default'])
    flask_config = create_flask_config(toml_config)
    flask_config.update({key: value for key, value in vars(base).items() if key.isupper()})
    return type(base.__name__, (object,), flask_config)
