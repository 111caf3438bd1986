"""Admin request and response Pydantic models."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class SessionResponse(BaseModel):
    logged_in: bool


class ArticleForm(BaseModel):
    """Editor form fields. Everything is optional here; the admin service validates."""

    slug: str | None = None
    title: str | None = None
    excerpt: str | None = None
    category: str | None = None
    category_slug: str | None = None
    author: str | None = None
    image: str | None = None
    image_alt: str | None = None
    read_time: str | int | None = None
    featured: bool | str | None = None
    body: str | None = None


class ActionResponse(BaseModel):
    """Discriminated action result: message on success, error on failure."""

    ok: bool
    message: str | None = None
    error: str | None = None


class GenerateRequest(BaseModel):
    prompt: str = ""


class GeneratedArticleResponse(BaseModel):
    slug: str
    title: str
    excerpt: str
    body: str
    category: str
    category_slug: str
    author: str
    image: str
    image_alt: str
    read_time: str


class GenerateResponse(BaseModel):
    ok: bool
    data: GeneratedArticleResponse | None = None
    error: str | None = None
