import hashlib
from datetime import date
from django.core.management.base import BaseCommand

from pages.models import Post, Tag


class Command(BaseCommand):
    help = "Seed demo posts (English plus one French translation) into the database"

    def handle(self, *args, **kwargs):
        tags = {
            "django": "Django",
            "react": "React",
            "forms": "Forms",
            "monorepo": "Monorepo",
        }
        tag_objs = {}
        for slug, name in tags.items():
            t, _ = Tag.objects.update_or_create(slug=slug, defaults={"name": name})
            tag_objs[slug] = t

        posts = [
            (
                "/building-a-booking-system/",
                "en",
                "Building a booking system with Django",
                "What two years of double-bookings taught me about transactions.",
                "<h2>Slots</h2><p>Every booking starts as a slot.</p><h2>Locks</h2><p>Then it needs a lock.</p>",
                date(2019, 3, 2),
                ["django"],
            ),
            (
                "/fr/building-a-booking-system/",
                "fr",
                "Construire un système de réservation avec Django",
                "Ce que deux ans de doubles réservations m'ont appris sur les transactions.",
                "<h2>Créneaux</h2><p>Chaque réservation commence par un créneau.</p>",
                date(2019, 3, 2),
                ["django"],
            ),
            (
                "/writing-a-form-library/",
                "en",
                "Writing a React form library",
                "Controlled inputs, validation and the state you did not expect.",
                "<h2>State</h2><p>Forms are state machines.</p><h2>Validation</h2><p>Run it late.</p>",
                date(2019, 6, 14),
                ["react", "forms"],
            ),
            (
                "/one-pipeline-many-packages/",
                "en",
                "One pipeline, many packages",
                "Building only what changed in a monorepo.",
                "<h2>Graph</h2><p>Start from the dependency graph.</p><h2>Cache</h2><p>Then cache it.</p>",
                date(2019, 11, 30),
                ["monorepo"],
            ),
        ]

        for slug, lang, title, excerpt, html, day, keywords in posts:
            p, _ = Post.objects.update_or_create(
                slug=slug,
                defaults=dict(
                    lang=lang,
                    title=title,
                    excerpt=excerpt,
                    body_html=html,
                    content_hash=hashlib.sha256(html.encode("utf-8")).hexdigest(),
                    date=day,
                    is_published=True,
                ),
            )
            p.tags.set([tag_objs[k] for k in keywords])

        self.stdout.write(self.style.SUCCESS(f"Seeded {len(tags)} tags and {len(posts)} posts."))
