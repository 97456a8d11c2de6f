from __future__ import annotations

from typing import Callable
from urllib.parse import quote

from django.conf import settings

DEFAULT_LANGUAGE = "en"

# Characters encodeURIComponent leaves alone on top of quote()'s own set.
_URI_COMPONENT_SAFE = "!~*'()"


def create_language_link(slug: str, lang: str) -> Callable[[str], str]:
    """Return a function mapping a target language to this post's address.

    The ``"{lang}/"`` prefix is removed by plain text replacement of its
    first occurrence. When ``lang`` is not in ``slug`` nothing is removed.
    Non-default targets are prepended without a separator.
    """
    raw_slug = slug.replace(f"{lang}/", "", 1)

    def language_link(target_lang: str) -> str:
        if target_lang == DEFAULT_LANGUAGE:
            return raw_slug
        return f"{target_lang}{raw_slug}"

    return language_link


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def discuss_url(address: str) -> str:
    """Social search URL for people talking about ``address``."""
    return f"{settings.DISCUSS_SEARCH_URL}{encode_uri_component(address)}"
