from __future__ import annotations

from django.db import models

from .links import DEFAULT_LANGUAGE


class Tag(models.Model):
    slug = models.SlugField(unique=True, db_index=True)
    name = models.CharField(max_length=80, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Post(models.Model):
    # URL path: "/my-post/" for the default language, "/fr/my-post/" otherwise.
    slug = models.CharField(max_length=255, unique=True, db_index=True)
    lang = models.CharField(max_length=10, default=DEFAULT_LANGUAGE, db_index=True)
    title = models.CharField(max_length=240)
    excerpt = models.TextField(blank=True)
    body_html = models.TextField()
    content_hash = models.CharField(max_length=64, blank=True, default="")
    date = models.DateField(db_index=True)
    is_published = models.BooleanField(default=True, db_index=True)

    tags = models.ManyToManyField(Tag, related_name="posts", blank=True)

    class Meta:
        ordering = ["-date", "-id"]

    def __str__(self) -> str:
        return self.title

    def get_absolute_url(self) -> str:
        return self.slug

    @property
    def keyword_list(self) -> list[str]:
        return [t.name for t in self.tags.all()]

    def previous_post(self) -> Post | None:
        """The next older published post in the same language."""
        try:
            return self.get_previous_by_date(is_published=True, lang=self.lang)
        except Post.DoesNotExist:
            return None

    def next_post(self) -> Post | None:
        """The next newer published post in the same language."""
        try:
            return self.get_next_by_date(is_published=True, lang=self.lang)
        except Post.DoesNotExist:
            return None
