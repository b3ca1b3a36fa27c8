# taskboard_app/storage.py
import logging
import threading

from .models import DEFAULT_CONTEXT_COLOR, Context, Task, TaskWithContext

logger = logging.getLogger(__name__)

DEFAULT_CONTEXTS = [
    {'name': 'Work', 'color': '#3b82f6'},
    {'name': 'Personal', 'color': '#10b981'},
    {'name': 'Learning', 'color': '#f59e0b'},
    {'name': 'Health', 'color': '#ef4444'},
]


class TaskNotFound(Exception):
    def __init__(self, task_id):
        super().__init__(f'Task with id {task_id} not found')
        self.task_id = task_id


class Storage:
    """Interface for context and task storage backends."""

    def get_contexts(self):
        raise NotImplementedError

    def get_context(self, context_id):
        raise NotImplementedError

    def get_context_by_name(self, name):
        raise NotImplementedError

    def create_context(self, data):
        raise NotImplementedError

    def get_or_create_context(self, data):
        raise NotImplementedError

    def get_tasks(self):
        raise NotImplementedError

    def get_task(self, task_id):
        raise NotImplementedError

    def get_tasks_by_context(self, context_id):
        raise NotImplementedError

    def create_task(self, data):
        raise NotImplementedError

    def update_task(self, task_id, update):
        raise NotImplementedError

    def delete_task(self, task_id):
        raise NotImplementedError


class MemStorage(Storage):
    """
    Keeps contexts and tasks in dicts keyed by integer id.

    Ids come from per-entity counters that only move forward, so an id is
    never handed out twice even after the record is deleted. Mutations run
    under a lock because a WSGI server may dispatch requests on several
    threads.
    """

    def __init__(self, seed_defaults=True):
        self._contexts = {}
        self._tasks = {}
        self._next_context_id = 1
        self._next_task_id = 1
        self._lock = threading.RLock()

        if seed_defaults:
            for item in DEFAULT_CONTEXTS:
                self.create_context(item)

    # --- Contexts ---

    def _snapshot(self, records):
        with self._lock:
            return list(records.values())

    def get_contexts(self):
        return self._snapshot(self._contexts)

    def get_context(self, context_id):
        return self._contexts.get(context_id)

    def get_context_by_name(self, name):
        wanted = name.lower()
        for context in self._snapshot(self._contexts):
            if context.name.lower() == wanted:
                return context
        return None

    def create_context(self, data):
        with self._lock:
            context = Context(
                id=self._next_context_id,
                name=data['name'],
                color=data.get('color') or DEFAULT_CONTEXT_COLOR,
            )
            self._next_context_id += 1
            self._contexts[context.id] = context
        logger.debug('Created context %s (%s)', context.id, context.name)
        return context

    def get_or_create_context(self, data):
        """Return (context, created); the name lookup and the insert happen under one lock."""
        with self._lock:
            existing = self.get_context_by_name(data['name'])
            if existing is not None:
                return existing, False
            return self.create_context(data), True

    # --- Tasks ---

    def _with_context(self, task):
        context = self.get_context(task.context_id) if task.context_id else None
        return TaskWithContext.from_task(task, context)

    def get_tasks(self):
        return [self._with_context(task) for task in self._snapshot(self._tasks)]

    def get_task(self, task_id):
        task = self._tasks.get(task_id)
        if task is None:
            return None
        return self._with_context(task)

    def get_tasks_by_context(self, context_id):
        context = self.get_context(context_id)
        return [
            TaskWithContext.from_task(task, context)
            for task in self._snapshot(self._tasks)
            if task.context_id == context_id
        ]

    def create_task(self, data):
        with self._lock:
            task = Task(
                id=self._next_task_id,
                name=data['name'],
                description=data['description'],
                # Empty comments and a zero/absent context id are stored as None
                comments=data.get('comments') or None,
                context_id=data.get('context_id') or None,
            )
            self._next_task_id += 1
            self._tasks[task.id] = task
        logger.debug('Created task %s in context %s', task.id, task.context_id)
        return self._with_context(task)

    def update_task(self, task_id, update):
        with self._lock:
            existing = self._tasks.get(task_id)
            if existing is None:
                raise TaskNotFound(task_id)
            task = update.apply_to(existing)
            self._tasks[task_id] = task
        logger.debug('Updated task %s', task_id)
        return self._with_context(task)

    def delete_task(self, task_id):
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is not None:
            logger.debug('Deleted task %s', task_id)
        return removed is not None
