"""Local development settings.

Debug on, any host, and outgoing booking emails printed to the console
instead of sent.
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# CELERY_TASK_ALWAYS_EAGER=true runs tasks inline without a broker.
CELERY_TASK_ALWAYS_EAGER = os.environ.get('CELERY_TASK_ALWAYS_EAGER', 'false').lower() == 'true'  # noqa: F405
