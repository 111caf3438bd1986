from generate_articles.categories import ALLOWED_CATEGORIES

_CATEGORY_LIST = ", ".join(ALLOWED_CATEGORIES)
_TOPICS_SHAPE = ",\n".join(f'  "{category}": "string"' for category in ALLOWED_CATEGORIES)

GENERATE_ARTICLE_INSTRUCTIONS = f"""
You are an assistant that writes complete articles for an entertainment and culture publication.
Given a user prompt describing the article they want, respond with ONLY a valid JSON object.
Do not wrap it in markdown code fences and do not add any explanation or other text.

Use these exact keys (all values are strings):

slug: URL-friendly slug, lowercase words joined by hyphens (e.g. "my-article-title")
title: the article title
excerpt: a short summary of 1-3 sentences
body: the full article text with 6-8 distinct paragraphs.
    Separate every paragraph with exactly one blank line (a double newline, "\\n\\n").
    Never return one long paragraph.
    Section headings go on their own line, prefixed with "## ".
category: exactly one of: {_CATEGORY_LIST}
imageKeywords: 2-4 comma-separated English keywords describing a photo that fits the article
    (e.g. "sci-fi movie,cinema,space" or "gaming,controller,screen"). No spaces after commas.
imageAlt: a short description of that photo for accessibility
readTime: estimated reading time in minutes as a number string (e.g. "5")
""".strip()


TRENDING_TOPICS_INSTRUCTIONS = f"""
You are an editor planning today's front page for an entertainment and culture publication.
Pick one timely, specific and currently trending story idea for each of these categories: {_CATEGORY_LIST}.

Respond with ONLY a valid JSON object. Do not wrap it in markdown code fences and do not add any other text.
Use the category names as keys, exactly as written above, and a one-sentence topic as each value:

{{
{_TOPICS_SHAPE}
}}
""".strip()

TRENDING_TOPICS_PROMPT = "List today's trending topics, one per category."


def build_category_prompt(topic: str, category: str) -> str:
    """Build the generation prompt for one trending topic."""
    return (
        f"Write a short, engaging article about: {topic}. Category is {category}. "
        "Use a casual, readable tone. Include 6-8 paragraphs and 2-4 section headings (## Heading). "
        "Make it timely and interesting."
    )
