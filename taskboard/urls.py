# taskboard/urls.py
from django.urls import include, path

urlpatterns = [
    path('api/', include('taskboard_app.urls')),
]
