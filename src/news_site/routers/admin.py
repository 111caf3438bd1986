"""Admin endpoints: session, article editing, AI drafting."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from article_store.store import ArticleStore
from generate_articles.config import GenerationConfig
from generate_articles.generate_articles import EMPTY_PROMPT_ERROR, NOT_LOGGED_IN_ERROR, generate_article_with_ai
from news_site.auth import COOKIE_NAME, SESSION_SECONDS, check_credentials, create_session_cookie
from news_site.config import SiteConfig, get_config
from news_site.dependencies import get_generation_config, get_store, is_admin_logged_in
from news_site.models.admin import (
    ActionResponse,
    ArticleForm,
    GenerateRequest,
    GenerateResponse,
    GeneratedArticleResponse,
    LoginRequest,
    SessionResponse,
)
from news_site.models.article import ArticleResponse
from news_site.services.admin_service import ActionError, ActionResult, AdminService

router = APIRouter(prefix="/admin", tags=["admin"])

STATUS_BY_ERROR = {
    ActionError.UNAUTHORIZED: 401,
    ActionError.INVALID: 400,
    ActionError.NOT_FOUND: 404,
    ActionError.DUPLICATE_SLUG: 409,
    ActionError.NOT_CONFIGURED: 503,
    ActionError.BACKEND: 500,
}


def get_admin_service(store: Annotated[ArticleStore, Depends(get_store)]) -> AdminService:
    """Dependency to get admin service."""
    return AdminService(store)


def action_response(result: ActionResult) -> JSONResponse:
    status = 200 if result.ok else STATUS_BY_ERROR.get(result.kind, 500)
    body = ActionResponse(ok=result.ok, message=result.message, error=result.error)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


@router.post("/login", response_model=ActionResponse)
async def login(
    credentials: LoginRequest,
    config: Annotated[SiteConfig, Depends(get_config)],
):
    error = check_credentials(credentials.email, credentials.password, config.admin)
    if error:
        status = 503 if not config.admin.is_configured else 401
        return JSONResponse(status_code=status, content={"ok": False, "error": error})

    response = JSONResponse(content={"ok": True, "message": "Logged in."})
    response.set_cookie(
        COOKIE_NAME,
        create_session_cookie(config.admin.email, config.admin.password),
        max_age=SESSION_SECONDS,
        httponly=True,
        secure=config.admin.secure_cookie,
        samesite="lax",
        path="/",
    )
    return response


@router.post("/logout", response_model=ActionResponse)
async def logout(response: Response):
    response.delete_cookie(COOKIE_NAME, path="/")
    return ActionResponse(ok=True, message="Logged out.")


@router.get("/session", response_model=SessionResponse)
async def session(logged_in: Annotated[bool, Depends(is_admin_logged_in)]):
    return SessionResponse(logged_in=logged_in)


@router.get("/articles", response_model=list[ArticleResponse])
async def list_admin_articles(
    store: Annotated[ArticleStore, Depends(get_store)],
    logged_in: Annotated[bool, Depends(is_admin_logged_in)],
):
    if not logged_in:
        return JSONResponse(status_code=401, content={"ok": False, "error": NOT_LOGGED_IN_ERROR})
    return [ArticleResponse(**asdict(a)) for a in store.get_all_articles()]


@router.post("/articles", response_model=ActionResponse)
async def create_article(
    form: ArticleForm,
    service: Annotated[AdminService, Depends(get_admin_service)],
    logged_in: Annotated[bool, Depends(is_admin_logged_in)],
):
    return action_response(service.create_article(form, logged_in))


@router.put("/articles/{article_id}", response_model=ActionResponse)
async def update_article(
    article_id: str,
    form: ArticleForm,
    service: Annotated[AdminService, Depends(get_admin_service)],
    logged_in: Annotated[bool, Depends(is_admin_logged_in)],
):
    return action_response(service.update_article(article_id, form, logged_in))


@router.post("/generate", response_model=GenerateResponse)
def generate_article(
    payload: GenerateRequest,
    config: Annotated[GenerationConfig, Depends(get_generation_config)],
    logged_in: Annotated[bool, Depends(is_admin_logged_in)],
):
    """Draft an article with the configured models for the editor to review."""
    result = generate_article_with_ai(payload.prompt, config, logged_in)
    if not result.ok or result.data is None:
        if not logged_in:
            status = 401
        elif result.error == EMPTY_PROMPT_ERROR:
            status = 400
        else:
            status = 502
        return JSONResponse(status_code=status, content={"ok": False, "error": result.error})

    data = asdict(result.data)
    data.pop("image_keywords", None)
    return GenerateResponse(ok=True, data=GeneratedArticleResponse(**data))
