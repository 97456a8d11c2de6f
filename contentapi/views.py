import hashlib
import logging

from django.conf import settings
from django.db import transaction
from django.utils.dateparse import parse_date
from django.utils.text import slugify

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.authentication import TokenAuthentication
from rest_framework.exceptions import ValidationError
from rest_framework.fields import BooleanField
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from pages.links import DEFAULT_LANGUAGE
from pages.models import Post, Tag

from .models import PostRevision

logger = logging.getLogger(__name__)


def sha256_hex(text: str) -> str:
    h = hashlib.sha256()
    h.update(text.encode("utf-8"))
    return h.hexdigest()


def parse_keywords(raw):
    """Frontmatter keywords arrive either as a list or a comma-separated string."""
    if raw is None:
        return []
    if isinstance(raw, list):
        words = [str(x).strip() for x in raw]
    elif isinstance(raw, str):
        words = [p.strip() for p in raw.split(",")]
    else:
        raise ValueError("keywords must be a list or a comma-separated string")
    return sorted({w for w in words if w})


def _tags_for(keywords):
    tags = []
    for name in keywords:
        slug = slugify(name) or "keyword"
        tag, _ = Tag.objects.get_or_create(slug=slug, defaults={"name": name})
        tags.append(tag)
    return tags


@api_view(["POST"])
@authentication_classes([TokenAuthentication])
@permission_classes([IsAuthenticated])
def upsert_post(request):
    p = request.data

    for k in ("slug", "title", "date", "html"):
        if k not in p:
            return Response({"error": f"missing field: {k}"}, status=status.HTTP_400_BAD_REQUEST)

    path = str(p["slug"]).strip().strip("/")
    title = str(p["title"])
    html = str(p["html"])
    excerpt = str(p.get("excerpt", "") or "")
    lang = str(p.get("lang") or DEFAULT_LANGUAGE)

    if not path:
        return Response({"error": "slug must not be empty"}, status=status.HTTP_400_BAD_REQUEST)
    slug = f"/{path}/"

    # Form bodies send "false" as a string.
    try:
        is_published = BooleanField().to_internal_value(p.get("is_published", True))
    except ValidationError:
        return Response({"error": "is_published must be a boolean"}, status=status.HTTP_400_BAD_REQUEST)

    try:
        date = parse_date(str(p["date"]))
    except ValueError:
        date = None
    if date is None:
        return Response({"error": "date must be an ISO date (YYYY-MM-DD)"}, status=status.HTTP_400_BAD_REQUEST)

    languages = {code for code, _ in settings.LANGUAGES}
    if lang not in languages:
        return Response({"error": f"unknown language: {lang}"}, status=status.HTTP_400_BAD_REQUEST)
    if lang != DEFAULT_LANGUAGE and not slug.startswith(f"/{lang}/"):
        return Response(
            {"error": f"slug for language {lang!r} must start with '/{lang}/'"},
            status=status.HTTP_400_BAD_REQUEST,
        )
    first_segment = path.split("/", 1)[0]
    if lang == DEFAULT_LANGUAGE and first_segment in languages:
        return Response(
            {"error": f"slug for language {lang!r} must not start with '/{first_segment}/'"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    try:
        keywords = parse_keywords(p.get("keywords"))
    except ValueError as e:
        return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    content_hash = str(p.get("content_hash") or sha256_hex(html))

    with transaction.atomic():
        post, created = Post.objects.select_for_update().get_or_create(
            slug=slug,
            defaults=dict(
                lang=lang,
                title=title,
                excerpt=excerpt,
                body_html=html,
                content_hash=content_hash,
                date=date,
                is_published=is_published,
            ),
        )

        if not created:
            if post.content_hash == content_hash:
                return Response({"status": "no_change", "slug": post.slug})

            PostRevision.objects.create(
                post=post,
                content_hash=post.content_hash,
                body_html=post.body_html,
            )

            post.lang = lang
            post.title = title
            post.excerpt = excerpt
            post.body_html = html
            post.content_hash = content_hash
            post.date = date
            post.is_published = is_published
            post.save()

        post.tags.set(_tags_for(keywords))

    logger.info("%s post %s (%s)", "Created" if created else "Updated", slug, content_hash[:12])
    return Response(
        {"status": "created" if created else "updated", "slug": post.slug, "content_hash": content_hash},
        status=status.HTTP_200_OK,
    )
