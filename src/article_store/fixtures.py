"""Sample articles served when no database is configured."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from article_store.models import Article, Category

CATEGORIES: list[Category] = [
    Category(name="Movies", slug="movies"),
    Category(name="TV", slug="tv"),
    Category(name="Gaming", slug="gaming"),
    Category(name="Tech", slug="tech"),
    Category(name="Culture", slug="culture"),
]

_UNSPLASH = "https://images.unsplash.com/photo-{}"


def _article(
    id: str,
    slug: str,
    title: str,
    excerpt: str,
    category: str,
    author: str,
    published_at: str,
    photo: str,
    read_time: int,
    image_alt: str | None = None,
    featured: bool | None = None,
) -> Article:
    return Article(
        id=id,
        slug=slug,
        title=title,
        excerpt=excerpt,
        category=category,
        category_slug=category.lower(),
        author=author,
        published_at=datetime.fromisoformat(published_at).replace(tzinfo=timezone.utc),
        image=_UNSPLASH.format(photo),
        image_alt=image_alt,
        featured=featured,
        read_time=read_time,
    )


FEATURED_ARTICLES: list[Article] = [
    _article(
        "1", "new-series-premiere-review",
        "The New Series Everyone's Binging Just Dropped Its Finale",
        "We break down the finale and what it means for season two.",
        "TV", "Jordan Lee", "2026-02-25T08:00:00",
        "1522869635100-9f4c5e86aa37?w=400&q=80", 4,
    ),
    _article(
        "2", "streaming-wars-whats-next",
        "Streaming Wars: What's Next for Your Favorite Platforms",
        "Major shifts are coming to how we watch. A deep dive into the future of streaming.",
        "TV", "Jordan Lee", "2026-02-24T14:30:00",
        "1574375927938-c5a448332a3e?w=800&q=80", 6, "Streaming on TV", True,
    ),
    _article(
        "3", "indie-game-of-the-year-contenders",
        "Indie Game of the Year: Early Contenders for 2026",
        "Small studios are delivering big experiences. These titles are already turning heads.",
        "Gaming", "Sam Chen", "2026-02-23T09:15:00",
        "1538481199705-c710c4e965fc?w=800&q=80", 7, "Gaming setup", True,
    ),
    _article(
        "4", "ai-in-creative-industries",
        "How AI Is Reshaping the Creative Industries",
        "From scriptwriting to visual effects, artificial intelligence is everywhere in entertainment.",
        "Tech", "Morgan Blake", "2026-02-22T16:00:00",
        "1677442136019-21780ecad995?w=800&q=80", 10, "AI and creativity", True,
    ),
    _article(
        "5", "cultural-moments-that-defined-february",
        "The Cultural Moments That Defined February 2026",
        "A look back at the events, releases, and trends that had everyone talking.",
        "Culture", "Riley Park", "2026-02-21T11:45:00",
        "1493225457124-a3eb161ffa5f?w=800&q=80", 5, "Concert crowd", True,
    ),
]

POPULAR_ARTICLES: list[Article] = [
    _article(
        "6", "new-series-premiere-review",
        "The New Series Everyone's Binging Just Dropped Its Finale",
        "We break down the finale and what it means for season two.",
        "TV", "Jordan Lee", "2026-02-25T08:00:00",
        "1522869635100-9f4c5e86aa37?w=400&q=80", 4,
    ),
    _article(
        "7", "retro-gaming-comeback",
        "Why Retro Gaming Is Bigger Than Ever in 2026",
        "Nostalgia meets modern convenience in the resurgence of classic games.",
        "Gaming", "Sam Chen", "2026-02-24T12:00:00",
        "1550745165-9bc0b252726f?w=400&q=80", 6,
    ),
    _article(
        "8", "documentary-filmmaking-today",
        "Documentary Filmmaking in the Age of Streaming",
        "How platforms are changing the way we tell true stories.",
        "Movies", "Alex Rivera", "2026-02-23T15:30:00",
        "1440404653323-ab43d7dd2f2a?w=400&q=80", 7,
    ),
    _article(
        "9", "podcasts-that-shaped-culture",
        "The Podcasts That Shaped Pop Culture This Year",
        "From true crime to comedy, these shows had the biggest impact.",
        "Culture", "Riley Park", "2026-02-22T09:00:00",
        "1478737270239-2f02b77fc618?w=400&q=80", 5,
    ),
]

TOPIC_SECTION: dict[str, Any] = {
    "title": "Deep Dives",
    "subtitle": "Explore in-depth features and long reads.",
    "link_label": "See More",
    "link_href": "/articles",
    "articles": [
        _article(
            "10", "behind-the-scenes-mega-franchise",
            "Behind the Scenes of the Year's Biggest Franchise",
            "An exclusive look at how the team brought this universe to life.",
            "Movies", "Alex Rivera", "2026-02-20T10:00:00",
            "1594909122845-11baa439b7bf?w=600&q=80", 12,
        ),
        _article(
            "11", "ten-best-shows-decade",
            "The 10 Best Shows of the Decade (So Far), Ranked",
            "A definitive ranking of the series that defined the 2020s.",
            "TV", "Jordan Lee", "2026-02-19T14:00:00",
            "1507003211169-0a1dd7228f2d?w=600&q=80", 15,
        ),
        _article(
            "12", "indie-games-you-missed",
            "10 Indie Games You Might Have Missed (And Why You Should Play Them)",
            "Hidden gems that deserve a spot on your playlist.",
            "Gaming", "Sam Chen", "2026-02-18T11:00:00",
            "1511512578047-dfb367046420?w=600&q=80", 8,
        ),
    ],
}

LATEST_ARTICLES: list[Article] = [
    _article(
        "13", "marvel-phase-six-rumors",
        "Marvel Phase Six: Every Rumor and Confirmed Project So Far",
        "The next chapter of the MCU is taking shape. Here's what we know.",
        "Movies", "Alex Rivera", "2026-02-25T07:00:00",
        "1635805737707-575885ab0820?w=400&q=80", 6,
    ),
    _article(
        "14", "hbo-max-originals-2026",
        "HBO Max Originals 2026: Full Slate Revealed",
        "From returning favorites to bold new series, the lineup is stacked.",
        "TV", "Jordan Lee", "2026-02-25T06:30:00",
        "1522869635100-9f4c5e86aa37?w=400&q=80", 5,
    ),
    _article(
        "15", "nintendo-next-console-leaks",
        "Nintendo's Next Console: Latest Leaks and What to Expect",
        "Rumors are heating up. We analyze every leak and report.",
        "Gaming", "Sam Chen", "2026-02-24T22:00:00",
        "1578303512597-81e6cc155b3e?w=400&q=80", 7,
    ),
    _article(
        "16", "privacy-tools-2026",
        "Best Privacy Tools for 2026: A Practical Guide",
        "Protect your data with these recommended apps and services.",
        "Tech", "Morgan Blake", "2026-02-24T18:00:00",
        "1563986768609-322da13575f3?w=400&q=80", 9,
    ),
    _article(
        "17", "festival-season-preview",
        "Festival Season 2026: What to Watch and Where",
        "A guide to the biggest film and music festivals around the world.",
        "Culture", "Riley Park", "2026-02-24T14:00:00",
        "1459749411175-04bf5292ceea?w=400&q=80", 6,
    ),
    _article(
        "18", "sci-fi-books-adaptations",
        "Sci-Fi Books Getting the Adaptation Treatment in 2026",
        "Your favorite novels are heading to screen. Here's the list.",
        "Movies", "Alex Rivera", "2026-02-24T10:00:00",
        "1507003211169-0a1dd7228f2d?w=400&q=80", 4,
    ),
]


def get_all_articles() -> list[Article]:
    """All unique fixture articles (by id), newest first."""
    by_id: dict[str, Article] = {}
    for article in [*FEATURED_ARTICLES, *POPULAR_ARTICLES, *TOPIC_SECTION["articles"], *LATEST_ARTICLES]:
        by_id[article.id] = article
    return sorted(by_id.values(), key=lambda a: a.published_at, reverse=True)


def get_article_by_slug(slug: str) -> Article | None:
    normalized = slug.strip().lower()
    for article in get_all_articles():
        if article.slug.lower() == normalized:
            return article
    return None


def get_articles_by_category(
    category_slug: str,
    exclude_id: str | None = None,
    limit: int = 6,
) -> list[Article]:
    slug = category_slug.strip().lower()
    matches = [
        a for a in get_all_articles()
        if a.category_slug.lower() == slug and a.id != exclude_id
    ]
    return matches[:limit]
