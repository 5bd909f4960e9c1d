# Flat "/post/{id}" paths from the first version of the site. Each one
# redirects to its BASE_PATH route; 308 keeps the method and form body.
from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from app.core.config import settings

router = APIRouter(tags=["legacy"], include_in_schema=False)

BASE = settings.base_path


def _moved(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_308_PERMANENT_REDIRECT)


@router.get("/")
async def home():
    return _moved(f"{BASE}/")


@router.get("/post/{post_id}")
async def legacy_detail(post_id: str):
    return _moved(f"{BASE}/{post_id}")


@router.post("/post/{post_id}/delete")
async def legacy_delete(post_id: str):
    return _moved(f"{BASE}/{post_id}/delete")


@router.api_route("/post/{post_id}/edit", methods=["GET", "POST"])
async def legacy_edit(post_id: str):
    return _moved(f"{BASE}/{post_id}/edit")


@router.get("/posts/new")
async def legacy_new_form():
    return _moved(f"{BASE}/new")


@router.post("/posts/new")
async def legacy_create():
    return _moved(f"{BASE}/")
