from pathlib import Path
from typing import Any, Mapping, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    view: str,
    context: Optional[Mapping[str, Any]] = None,
    status_code: int = 200,
):
    """Render ``<view>.html`` with ``context``."""
    return templates.TemplateResponse(
        request,
        f"{view}.html",
        dict(context or {}),
        status_code=status_code,
    )
