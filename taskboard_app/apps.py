from django.apps import AppConfig
from django.conf import settings

from .storage import MemStorage


class TaskboardAppConfig(AppConfig):
    """
    Owns the process-wide store. It is built once the app registry is ready,
    so its lifetime matches the server process.
    """

    name = 'taskboard_app'
    verbose_name = 'Taskboard'
    store = None

    def ready(self):
        self.store = MemStorage(seed_defaults=getattr(settings, 'TASKBOARD_SEED_CONTEXTS', True))
