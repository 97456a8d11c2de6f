from datetime import date

import pytest


@pytest.fixture
def site(settings):
    settings.SITE_URL = "https://beeola.me"
    settings.DISCUSS_SEARCH_URL = "https://mobile.twitter.com/search?q="
    return settings


def test_post_page_renders_content_and_footer(client, make_post, site):
    make_post(
        "/booking-system/",
        title="Building a booking system",
        keywords=["Django", "Postgres"],
        body_html="<h2>Slots</h2><p>Every booking starts as a slot.</p>",
    )

    resp = client.get("/booking-system/")
    html = resp.content.decode()

    assert resp.status_code == 200
    assert "<h1>Building a booking system</h1>" in html
    assert "March 02, 2019" in html
    assert "<h2>Slots</h2><p>Every booking starts as a slot.</p>" in html
    assert 'content="Django, Postgres"' in html
    assert "https://mobile.twitter.com/search?q=https%3A%2F%2Fbeeola.me%2Fbooking-system%2F" in html
    assert "Discuss on Twitter" in html
    assert resp.context["canonical_url"] == "https://beeola.me/booking-system/"
    assert resp.context["original"] is None


def test_translated_post_discusses_the_english_address(client, make_post, site):
    english = make_post("/booking-system/", title="Building a booking system")
    make_post("/fr/booking-system/", lang="fr", title="Construire un système de réservation")

    resp = client.get("/fr/booking-system/")

    assert resp.status_code == 200
    assert resp.context["canonical_url"] == "https://beeola.me/booking-system/"
    assert resp.context["original"] == english
    assert 'href="/booking-system/"' in resp.content.decode()


def test_translation_without_original_has_no_original_link(client, make_post, site):
    make_post("/fr/seulement/", lang="fr")

    resp = client.get("/fr/seulement/")

    assert resp.status_code == 200
    assert resp.context["original"] is None
    assert "Read the original" not in resp.content.decode()


def test_post_navigation_links_neighbours(client, make_post):
    make_post("/older/", title="Older post", day=date(2019, 1, 1))
    make_post("/middle/", title="Middle post", day=date(2019, 2, 1))
    make_post("/newer/", title="Newer post", day=date(2019, 3, 1))

    html = client.get("/middle/").content.decode()

    assert 'href="/older/" rel="prev">&larr; Older post</a>' in html
    assert 'href="/newer/" rel="next">Newer post &rarr;</a>' in html


def test_missing_trailing_slash_still_resolves(client, make_post):
    make_post("/booking-system/")

    assert client.get("/booking-system").status_code == 200


def test_unpublished_and_unknown_posts_are_404(client, make_post):
    make_post("/draft/", published=False)

    assert client.get("/draft/").status_code == 404
    assert client.get("/does-not-exist/").status_code == 404


def test_index_lists_default_language_posts(client, make_post):
    make_post("/one/", title="English one")
    make_post("/fr/one/", lang="fr", title="French one")

    resp = client.get("/")
    titles = [p.title for p in resp.context["posts"]]

    assert resp.status_code == 200
    assert titles == ["English one"]
    assert resp.context["lang"] == "en"


def test_index_filters_by_language_and_tag(client, make_post):
    make_post("/fr/one/", lang="fr", title="Un", keywords=["Django"])
    make_post("/fr/two/", lang="fr", title="Deux", keywords=["React"])

    resp = client.get("/", {"lang": "fr", "tag": "react"})

    assert [p.title for p in resp.context["posts"]] == ["Deux"]
    assert resp.context["tag_labels"] == {"all": "All", "django": "Django", "react": "React"}


def test_index_unknown_language_falls_back_to_default(client, make_post):
    make_post("/one/", title="English one")

    resp = client.get("/", {"lang": "xx"})

    assert resp.context["lang"] == "en"
    assert [p.title for p in resp.context["posts"]] == ["English one"]


def test_biography_widget_uses_site_metadata(client, make_post, settings):
    settings.SITE_METADATA = {
        "title": "Test blog",
        "author": "Sam",
        "bio": "Writes about forms.",
        "links": [{"label": "GitHub", "href": "https://github.com/", "external": True}],
    }
    make_post("/one/")

    html = client.get("/one/").content.decode()

    assert "Writes about forms." in html
    assert "<strong>Sam</strong>" in html
    assert 'href="https://github.com/" target="_blank"' in html


@pytest.mark.parametrize("slug", ["/broken/", "/when-forms-are-broken/"])
def test_default_language_slug_is_used_as_is(client, make_post, site, slug):
    make_post(slug)

    resp = client.get(slug)

    assert resp.status_code == 200
    assert resp.context["canonical_url"] == f"https://beeola.me{slug}"
    assert resp.context["discuss_url"].endswith(slug.replace("/", "%2F"))


def test_biography_widget_separates_site_and_external_links(client, make_post, settings):
    settings.SITE_METADATA = {
        "title": "Test blog",
        "author": "Sam",
        "bio": "",
        "links": [
            {"label": "Archive", "href": "/", "external": False},
            {"label": "GitHub", "href": "https://github.com/", "external": True},
        ],
    }
    make_post("/one/")

    html = client.get("/one/").content.decode()

    assert '<a href="/">Archive</a>' in html
    assert 'href="https://github.com/" target="_blank" rel="noopener noreferrer">GitHub</a>' in html
