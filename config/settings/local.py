"""
Local development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1']

LOG_LEVEL = 'DEBUG'
LOGGING['loggers']['modules']['level'] = LOG_LEVEL  # noqa: F405
LOGGING['loggers']['shared']['level'] = LOG_LEVEL  # noqa: F405
