from typing import List, Optional, Protocol
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post
from app.core.logger import logger


def parse_post_id(post_id: UUID | str) -> Optional[UUID]:
    """Malformed ids cannot match any post, so they map to None."""
    if isinstance(post_id, UUID):
        return post_id
    try:
        return UUID(str(post_id))
    except ValueError:
        return None


class PostRepository(Protocol):
    """What the post routes need from storage."""

    async def list_posts(self) -> List[Post]: ...

    async def get_post(self, post_id: UUID | str) -> Optional[Post]: ...

    async def create_post(self, title: str, body: str) -> Post: ...

    async def update_post(self, post_id: UUID | str, title: str, body: str) -> Optional[Post]: ...

    async def delete_post(self, post_id: UUID | str) -> Optional[Post]: ...


class PostService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_posts(self) -> List[Post]:
        stmt = select(Post).order_by(Post.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_post(self, post_id: UUID | str) -> Optional[Post]:
        pid = parse_post_id(post_id)
        if pid is None:
            return None

        stmt = select(Post).where(Post.id == pid)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create_post(self, title: str, body: str) -> Post:
        post = Post(title=title, body=body)

        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        logger.info("post_created", post_id=str(post.id), title_len=len(title), body_len=len(body))

        return post

    async def update_post(self, post_id: UUID | str, title: str, body: str) -> Optional[Post]:
        post = await self.get_post(post_id)
        if not post:
            return None

        post.title = title
        post.body = body

        await self.db.commit()
        await self.db.refresh(post)
        logger.info("post_updated", post_id=str(post.id))

        return post

    async def delete_post(self, post_id: UUID | str) -> Optional[Post]:
        post = await self.get_post(post_id)
        if not post:
            return None

        await self.db.delete(post)
        await self.db.commit()
        logger.info("post_deleted", post_id=str(post.id))

        return post
