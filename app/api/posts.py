from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from app.core.config import settings
from app.core.errors import PostNotFoundError, PostValidationError, handle_errors
from app.core.views import render
from app.dependencies.posts import get_post_repository
from app.schemas.post import PostForm, PostView
from app.services.post_service import PostRepository

router = APIRouter(prefix=settings.base_path, tags=["posts"])

BASE = settings.base_path


def _redirect(url: str) -> RedirectResponse:
    # 303 so the browser follows a form POST with a GET
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _new_form_context(**extra) -> dict:
    return {
        "form_action": f"{BASE}/",
        "submit_label": "Add New Post",
        "cancel_href": f"{BASE}/",
        "page_title": "Add New Post",
        "base_path": BASE,
        **extra,
    }


def _edit_form_context(post_id, page_title: str, **extra) -> dict:
    return {
        "form_action": f"{BASE}/{post_id}/edit",
        "submit_label": "Save Changes",
        "cancel_href": f"{BASE}/{post_id}",
        "page_title": page_title,
        "base_path": BASE,
        **extra,
    }


@router.get("/")
@handle_errors("Error fetching posts")
async def list_posts(
    request: Request,
    repo: PostRepository = Depends(get_post_repository),
):
    posts = await repo.list_posts()
    views = [PostView.from_post(p, summary_length=settings.SUMMARY_LENGTH) for p in posts]
    return render(request, "index", {"posts": views, "base_path": BASE})


@router.post("/")
@handle_errors("Error creating post")
async def create_post(
    request: Request,
    repo: PostRepository = Depends(get_post_repository),
):
    form = PostForm.from_form(await request.form())
    try:
        form.ensure_valid()
    except PostValidationError as exc:
        return render(
            request,
            "new",
            _new_form_context(errors=exc.errors, title=form.title, body=form.body),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    post = await repo.create_post(form.title, form.body)
    return _redirect(post.url)


@router.get("/new")
@handle_errors("Error showing new post form")
async def new_post_form(request: Request):
    return render(request, "new", _new_form_context())


@router.get("/{post_id}")
@handle_errors("Error fetching post")
async def get_post(
    post_id: str,
    request: Request,
    repo: PostRepository = Depends(get_post_repository),
):
    post = await repo.get_post(post_id)
    if not post:
        raise PostNotFoundError()

    return render(request, "detail", {"post": PostView.from_post(post), "base_path": BASE})


@router.post("/{post_id}/delete")
@handle_errors("Error deleting post")
async def delete_post(
    post_id: str,
    repo: PostRepository = Depends(get_post_repository),
):
    deleted = await repo.delete_post(post_id)
    if not deleted:
        raise PostNotFoundError()

    return _redirect(f"{BASE}/")


@router.get("/{post_id}/edit")
@handle_errors("Error showing edit form")
async def edit_post_form(
    post_id: str,
    request: Request,
    repo: PostRepository = Depends(get_post_repository),
):
    post = await repo.get_post(post_id)
    if not post:
        raise PostNotFoundError()

    return render(
        request,
        "new",
        _edit_form_context(post.id, f"Edit: {post.title}", title=post.title, body=post.body),
    )


@router.post("/{post_id}/edit")
@handle_errors("Error updating post")
async def update_post(
    post_id: str,
    request: Request,
    repo: PostRepository = Depends(get_post_repository),
):
    form = PostForm.from_form(await request.form())
    try:
        form.ensure_valid(check_body_length=settings.CHECK_BODY_LENGTH_ON_UPDATE)
    except PostValidationError as exc:
        return render(
            request,
            "new",
            _edit_form_context(post_id, "Edit Post", errors=exc.errors, title=form.title, body=form.body),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    updated = await repo.update_post(post_id, form.title, form.body)
    if not updated:
        raise PostNotFoundError()

    return _redirect(updated.url)
