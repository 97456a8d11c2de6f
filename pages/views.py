from __future__ import annotations

import logging

from django.conf import settings
from django.http import Http404
from django.shortcuts import render

from .links import DEFAULT_LANGUAGE, create_language_link, discuss_url
from .models import Post, Tag

logger = logging.getLogger(__name__)


def _known_languages() -> set[str]:
    return {code for code, _ in settings.LANGUAGES}


def _absolute(path: str) -> str:
    return settings.SITE_URL.rstrip("/") + path


def posts(request):
    tag = (request.GET.get("tag") or "all").lower()
    lang = (request.GET.get("lang") or DEFAULT_LANGUAGE).lower()
    if lang not in _known_languages():
        lang = DEFAULT_LANGUAGE

    qs = Post.objects.filter(is_published=True, lang=lang).prefetch_related("tags")

    if tag != "all":
        qs = qs.filter(tags__slug=tag)

    tag_objs = Tag.objects.filter(posts__lang=lang, posts__is_published=True).distinct()
    tag_labels = {"all": "All", **{t.slug: t.name for t in tag_objs}}

    ctx = {
        "posts": qs,
        "tag": tag,
        "lang": lang,
        "tag_labels": tag_labels,
    }
    return render(request, "pages/posts.html", ctx)


def post(request, slug: str):
    path = f"/{slug.strip('/')}/"
    try:
        p = Post.objects.prefetch_related("tags").get(slug=path, is_published=True)
    except Post.DoesNotExist:
        logger.debug("No published post at %s", path)
        raise Http404("Post not found")

    # Default-language slugs carry no language segment to strip.
    en_slug = p.slug
    original = None
    if p.lang != DEFAULT_LANGUAGE:
        en_slug = create_language_link(p.slug, p.lang)(DEFAULT_LANGUAGE)
        original = Post.objects.filter(slug=en_slug, is_published=True).first()
    canonical_url = _absolute(en_slug)

    ctx = {
        "post": p,
        "keywords": p.keyword_list,
        "previous": p.previous_post(),
        "next": p.next_post(),
        "canonical_url": canonical_url,
        "discuss_url": discuss_url(canonical_url),
        "original": original,
        "lang": p.lang,
    }
    return render(request, "pages/post.html", ctx)
