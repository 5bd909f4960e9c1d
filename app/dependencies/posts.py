from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.services.post_service import PostRepository, PostService


async def get_post_repository(
    db: AsyncSession = Depends(get_session),
) -> PostRepository:
    return PostService(db)
