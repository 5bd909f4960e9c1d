from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.config import settings
from app.core.database import Base

ELLIPSIS = "..."


def summarize(text: str, length: int) -> str:
    """Shorten ``text`` to at most ``length`` characters plus an ellipsis.

    Text that already fits is returned untouched. Longer text is cut on the
    last word boundary inside the limit when there is one, otherwise hard at
    ``length``.
    """
    if length <= 0:
        return ELLIPSIS if text else text
    if len(text) <= length:
        return text

    cut = text[:length]
    if not text[length].isspace():
        boundary = max(cut.rfind(" "), cut.rfind("\n"))
        if boundary > 0:
            cut = cut[:boundary]
    return cut.rstrip() + ELLIPSIS


class Post(Base):
    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )

    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    @property
    def url(self) -> str:
        return f"{settings.base_path}/{self.id}"

    def get_summary(self, length: int | None = None) -> str:
        return summarize(self.body or "", length if length is not None else settings.SUMMARY_LENGTH)

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r}>"
