"""
Django settings for the taskboard service.

Values come from TASKBOARD_* environment variables so the same settings
module serves local runs, tests and deployments.
"""

import os


def _env(name, default=''):
    value = os.getenv(f'TASKBOARD_{name}')
    return default if value is None else value


def _env_bool(name, default):
    raw = os.getenv(f'TASKBOARD_{name}')
    if raw is None:
        return default
    return raw.strip().lower() in {'1', 'true', 'yes', 'y', 'on'}


def _env_list(name, default):
    raw = os.getenv(f'TASKBOARD_{name}')
    if raw is None or raw.strip() == '':
        return default
    return [item.strip() for item in raw.split(',') if item.strip()]


SECRET_KEY = _env('SECRET_KEY', 'django-insecure-taskboard-dev-key')
DEBUG = _env_bool('DEBUG', False)
ALLOWED_HOSTS = _env_list('ALLOWED_HOSTS', ['localhost', '127.0.0.1', 'testserver'])

# Seed Work/Personal/Learning/Health when the store is created
TASKBOARD_SEED_CONTEXTS = _env_bool('SEED_CONTEXTS', True)

INSTALLED_APPS = [
    'rest_framework',
    'taskboard_app.apps.TaskboardAppConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'taskboard.urls'
WSGI_APPLICATION = 'taskboard.wsgi.application'
APPEND_SLASH = False

# Tasks and contexts live in memory; no database is configured.
DATABASES = {}

USE_TZ = True
TIME_ZONE = 'UTC'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'taskboard_app.exceptions.taskboard_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

LOG_LEVEL = _env('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'loggers': {
        'taskboard_app': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
