from datetime import date

import pytest

from pages.models import Post, Tag


@pytest.fixture
def make_post(db):
    def _make_post(slug, *, lang="en", title=None, day=date(2019, 3, 2), keywords=(), published=True,
                   excerpt="A short excerpt.", body_html="<p>Hello from the post body.</p>"):
        p = Post.objects.create(
            slug=slug,
            lang=lang,
            title=title or slug.strip("/").split("/")[-1].replace("-", " ").title(),
            excerpt=excerpt,
            body_html=body_html,
            date=day,
            is_published=published,
        )
        tags = [Tag.objects.get_or_create(slug=k.lower(), defaults={"name": k})[0] for k in keywords]
        p.tags.set(tags)
        return p

    return _make_post
