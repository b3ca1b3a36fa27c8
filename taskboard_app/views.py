# taskboard_app/views.py
import logging

from django.apps import apps
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import (
    ContextInputSerializer,
    ContextSerializer,
    TaskInputSerializer,
    TaskWithContextSerializer,
)
from .storage import TaskNotFound

logger = logging.getLogger(__name__)


def parse_id(raw):
    """Return the integer id in a URL segment, or None when it is not numeric."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class StoreAPIView(APIView):
    """
    Base view holding the store the handlers operate on.

    The store defaults to the one owned by the taskboard_app config. A
    different instance can be injected with as_view(store=...).
    """

    store = None
    failure_messages = {}

    def get_store(self):
        if self.store is not None:
            return self.store
        return apps.get_app_config('taskboard_app').store

    def get_serializer_context(self):
        return {'request': self.request, 'view': self, 'store': self.get_store()}


class ContextListView(StoreAPIView):
    """
    API view listing contexts and creating new ones.
    Creation is idempotent by name: posting a name that already exists
    (ignoring case) returns the stored context instead of a duplicate.
    """

    failure_messages = {
        'get': 'Failed to fetch contexts',
        'post': 'Failed to create context',
    }

    def get(self, request):
        contexts = self.get_store().get_contexts()
        return Response(ContextSerializer(contexts, many=True).data)

    def post(self, request):
        """
        Handle POST requests to create a context.

        Request Body:
            name (str): Context name, required.
            color (str): Optional display colour, defaults to "#3b82f6".

        Returns:
            Response: The existing context with HTTP 200 when the name is
            already taken, otherwise the new context with HTTP 201.
        """
        serializer = ContextInputSerializer(data=request.data, context=self.get_serializer_context())
        serializer.is_valid(raise_exception=True)

        context, created = self.get_store().get_or_create_context(serializer.validated_data)
        if not created:
            return Response(ContextSerializer(context).data, status=status.HTTP_200_OK)

        logger.info('Context %s created: %s', context.id, context.name)
        return Response(ContextSerializer(context).data, status=status.HTTP_201_CREATED)


class ContextTaskListView(StoreAPIView):
    failure_messages = {'get': 'Failed to fetch tasks'}

    def get(self, request, context_id):
        pk = parse_id(context_id)
        if pk is None:
            return Response({'message': 'Invalid context ID'}, status=status.HTTP_400_BAD_REQUEST)

        store = self.get_store()
        if store.get_context(pk) is None:
            raise NotFound('Context not found')
        tasks = store.get_tasks_by_context(pk)
        return Response(TaskWithContextSerializer(tasks, many=True).data)


class TaskListView(StoreAPIView):
    failure_messages = {
        'get': 'Failed to fetch tasks',
        'post': 'Failed to create task',
    }

    def get(self, request):
        tasks = self.get_store().get_tasks()
        return Response(TaskWithContextSerializer(tasks, many=True).data)

    def post(self, request):
        serializer = TaskInputSerializer(data=request.data, context=self.get_serializer_context())
        serializer.is_valid(raise_exception=True)
        task = serializer.save()
        logger.info('Task %s created in context %s', task.id, task.context_id)
        return Response(TaskWithContextSerializer(task).data, status=status.HTTP_201_CREATED)


class TaskDetailView(StoreAPIView):
    """
    API view for a single task: fetch, partial update and delete.
    Every handler answers 400 for a non-numeric id and 404 for an unknown one.
    """

    failure_messages = {
        'get': 'Failed to fetch task',
        'patch': 'Failed to update task',
        'delete': 'Failed to delete task',
    }

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.task_pk = parse_id(kwargs.get('task_id'))

    def invalid_id(self):
        return Response({'message': 'Invalid task ID'}, status=status.HTTP_400_BAD_REQUEST)

    def get_task(self):
        task = self.get_store().get_task(self.task_pk)
        if task is None:
            raise NotFound('Task not found')
        return task

    def get(self, request, task_id):
        if self.task_pk is None:
            return self.invalid_id()
        return Response(TaskWithContextSerializer(self.get_task()).data)

    def patch(self, request, task_id):
        """
        Handle PATCH requests to update some fields of a task.

        Only the fields present in the body are changed. "comments" and
        "contextId" may be sent as null to clear them.

        Returns:
            Response: The updated task with HTTP 200.
        """
        if self.task_pk is None:
            return self.invalid_id()

        serializer = TaskInputSerializer(
            self.get_task(),
            data=request.data,
            partial=True,
            context=self.get_serializer_context(),
        )
        serializer.is_valid(raise_exception=True)
        try:
            task = serializer.save()
        except TaskNotFound:
            raise NotFound('Task not found')
        return Response(TaskWithContextSerializer(task).data)

    def delete(self, request, task_id):
        if self.task_pk is None:
            return self.invalid_id()

        if not self.get_store().delete_task(self.task_pk):
            raise NotFound('Task not found')
        logger.info('Task %s deleted', self.task_pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
