from typing import Any, List, Mapping, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from app.core.config import settings
from app.core.errors import PostValidationError


class PostForm(BaseModel):
    """Title and body as submitted through the post form."""

    title: str = ""
    body: str = ""

    @field_validator("title", "body", mode="before")
    @classmethod
    def _clean(cls, value: Any) -> str:
        # anything that is not a plain string (missing field, file upload) counts as empty
        return value.strip() if isinstance(value, str) else ""

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "PostForm":
        return cls(title=data.get("title"), body=data.get("body"))

    def errors(self, check_body_length: bool = True) -> List[str]:
        errors: List[str] = []
        if not self.title:
            errors.append("Title is required.")
        if not self.body:
            errors.append("Body is required.")
        if self.title and len(self.title) > settings.TITLE_MAX_LENGTH:
            errors.append(f"Title must be {settings.TITLE_MAX_LENGTH} characters or fewer.")
        if check_body_length and self.body and len(self.body) > settings.BODY_MAX_LENGTH:
            errors.append("Body is too long.")
        return errors

    def ensure_valid(self, check_body_length: bool = True) -> "PostForm":
        errors = self.errors(check_body_length=check_body_length)
        if errors:
            raise PostValidationError(errors)
        return self


class PostView(BaseModel):
    id: UUID
    title: str
    body: str
    url: str
    summary: Optional[str] = None

    class Config:
        from_attributes = True  # enables ORM → schema conversion

    @classmethod
    def from_post(cls, post, summary_length: Optional[int] = None) -> "PostView":
        view = cls.model_validate(post)
        if summary_length is not None:
            view.summary = post.get_summary(summary_length)
        return view
