"""
URL configuration for config project.

Account operations are exposed by the surrounding transport, not here;
only the operator admin is routed.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),
]
