# taskboard_app/urls.py
from django.urls import path
from .views import ContextListView, ContextTaskListView, TaskDetailView, TaskListView

urlpatterns = [
    path('contexts', ContextListView.as_view(), name='context-list'),
    path('contexts/<str:context_id>/tasks', ContextTaskListView.as_view(), name='context-tasks'),
    path('tasks', TaskListView.as_view(), name='task-list'),
    path('tasks/<str:task_id>', TaskDetailView.as_view(), name='task-detail'),
]
