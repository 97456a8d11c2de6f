from __future__ import annotations

from typing import Optional

from django import template

register = template.Library()


@register.inclusion_tag("pages/widgets/biography.html", takes_context=True)
def biography_widget(context, author: Optional[str] = None):
    """Author box shown under each post and beside the index."""
    profile = context.get("site_profile") or {}
    links = profile.get("links") or []
    return {
        "author": author or context.get("site_author", ""),
        "bio": profile.get("bio", ""),
        "external_links": [link for link in links if link.get("external")],
        "site_links": [link for link in links if not link.get("external")],
    }


@register.inclusion_tag("pages/widgets/keywords.html", takes_context=True)
def keywords_widget(context, title: str = "Keywords", tag: str | None = None, tag_labels: dict | None = None, lang: str | None = None):
    """Keyword filter for the posts index."""
    labels = tag_labels if tag_labels is not None else (context.get("tag_labels") or {})
    current = tag if tag is not None else context.get("tag")
    current_lang = lang if lang is not None else context.get("lang")
    return {"title": title, "tag_labels": labels, "current_tag": current, "lang": current_lang}


@register.inclusion_tag("pages/widgets/post_navigation.html", takes_context=True)
def post_navigation_widget(context, previous=None, next=None):
    """Links to the older and newer neighbours of a post."""
    return {
        "previous": previous if previous is not None else context.get("previous"),
        "next": next if next is not None else context.get("next"),
    }
