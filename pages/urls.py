from django.urls import path
from . import views

app_name = "pages"

urlpatterns = [
    path("", views.posts, name="posts"),
    # Post slugs are URL paths, translated ones carry their language: /fr/my-post/
    path("<path:slug>", views.post, name="post"),
]
