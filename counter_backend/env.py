# counter_backend/env.py
import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def env_str(name, default=None):
    return os.environ.get(name, default)


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def env_list(name, default=''):
    """Split a comma separated variable, dropping blanks."""
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


def database_config(base_dir: Path) -> dict:
    """
    Build DATABASES['default'] from DB_* variables.

    DB_ENGINE is either "sqlite" (the default) or "postgres".
    """
    engine = env_str('DB_ENGINE', 'sqlite').strip().lower()

    if engine == 'sqlite':
        return {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': env_str('DB_NAME', str(base_dir / 'db.sqlite3')),
        }

    if engine in ('postgres', 'postgresql'):
        return {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': env_str('DB_NAME', 'counter'),
            'USER': env_str('DB_USER', 'postgres'),
            'PASSWORD': env_str('DB_PASSWORD', ''),
            'HOST': env_str('DB_HOST', 'localhost'),
            'PORT': env_str('DB_PORT', '5432'),
        }

    raise ImproperlyConfigured(f"Unsupported DB_ENGINE: {engine!r}")
