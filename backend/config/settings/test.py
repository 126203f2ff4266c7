"""
Test settings: in-memory SQLite, console-only logging.
"""

from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS = False

# =============================================================================
# LOGGING - Test (no log files, let pytest capture records)
# =============================================================================
LOGGING['handlers'].pop('file')
for _logger in ('application', 'infrastructure'):
    LOGGING['loggers'][_logger]['handlers'] = []
    LOGGING['loggers'][_logger]['propagate'] = True
