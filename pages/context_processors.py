from django.conf import settings


def site_metadata(request):
    meta = getattr(settings, "SITE_METADATA", {}) or {}
    return {
        "site_title": meta.get("title", ""),
        "site_author": meta.get("author", ""),
        "site_url": settings.SITE_URL,
        # Used by the biography widget
        "site_profile": {
            "bio": meta.get("bio", ""),
            "links": list(meta.get("links", []) or []),
        },
    }
