"""URL configuration for the example development server."""

from django.urls import include, path

urlpatterns = [
    path("", include("django_devsummit.site.urls")),
]
