"""
Development settings for the task planner backend.
"""

from .base import *

# =============================================================================
# DEBUG
# =============================================================================
DEBUG = True

# =============================================================================
# ALLOWED HOSTS
# =============================================================================
ALLOWED_HOSTS = ['*']

# =============================================================================
# DATABASE - Development Override
# =============================================================================
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': config('DB_NAME', default='taskplanner'),
        'USER': config('DB_USER', default='postgres'),
        'PASSWORD': config('DB_PASSWORD', default='postgres'),
        'HOST': config('DB_HOST', default='127.0.0.1'),
        'PORT': config('DB_PORT', default='5432'),
    }
}

# =============================================================================
# TASK TEMPLATES - Development
# =============================================================================
# Demo data is easier to play with when groups can be re-created freely.
TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS = config('TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS', default=True, cast=bool)

# =============================================================================
# LOGGING - Development
# =============================================================================
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['application']['level'] = 'DEBUG'
LOGGING['loggers']['infrastructure']['level'] = 'DEBUG'

os.makedirs(LOG_DIR, exist_ok=True)
