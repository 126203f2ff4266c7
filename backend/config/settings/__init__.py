"""
Settings module initialization.
Automatically selects settings based on DJANGO_ENV environment variable.

Only applies when DJANGO_SETTINGS_MODULE points at this package; an explicit
module (e.g. config.settings.test) is loaded on its own.
"""

import os

if os.environ.get('DJANGO_SETTINGS_MODULE', __name__) == __name__:
    env = os.environ.get('DJANGO_ENV', 'dev')

    if env == 'prod':
        from .prod import *
    elif env == 'test':
        from .test import *
    else:
        from .dev import *
