from django.urls import path
from . import views

app_name = "contentapi"

urlpatterns = [
    path("posts/", views.upsert_post, name="upsert_post"),
]
