from django.urls import include, path

urlpatterns = [
    path("api/", include("contentapi.urls")),
    path("", include("pages.urls")),
]
