"""Test settings for minibnb.

Uses a throwaway file-backed SQLite database unless `DB_ENGINE` points elsewhere,
fast password hashing and an isolated local-memory cache.
"""

import os

from .base import *  # noqa: F401,F403

DEBUG = False

if 'DB_ENGINE' not in os.environ:
    # File-backed so that threads opening their own connections share it
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',  # noqa: F405
            'OPTIONS': SQLITE_OPTIONS,  # noqa: F405
            'TEST': {'NAME': BASE_DIR / 'test-db.sqlite3'},  # noqa: F405
        }
    }

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'minibnb-test-cache',
    }
}

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'CRITICAL'  # noqa: F405
