import os
import tempfile
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import uuid4

# settings are read once at import time, so point them somewhere disposable first
_TMP = tempfile.mkdtemp(prefix="blog-tests-")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_DIR", os.path.join(_TMP, "logs"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{os.path.join(_TMP, 'blog.db')}")

import pytest
from fastapi.testclient import TestClient

from app.dependencies.posts import get_post_repository
from app.main import app
from app.models.post import Post
from app.services.post_service import parse_post_id


class InMemoryPostRepository:
    """Dict-backed stand-in for PostService."""

    def __init__(self) -> None:
        self.posts: Dict = {}

    async def list_posts(self) -> List[Post]:
        return sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)

    async def get_post(self, post_id) -> Optional[Post]:
        pid = parse_post_id(post_id)
        return self.posts.get(pid) if pid else None

    async def create_post(self, title: str, body: str) -> Post:
        now = datetime.now(timezone.utc)
        post = Post(id=uuid4(), title=title, body=body, created_at=now, updated_at=now)
        self.posts[post.id] = post
        return post

    async def update_post(self, post_id, title: str, body: str) -> Optional[Post]:
        post = await self.get_post(post_id)
        if not post:
            return None
        post.title = title
        post.body = body
        post.updated_at = datetime.now(timezone.utc)
        return post

    async def delete_post(self, post_id) -> Optional[Post]:
        pid = parse_post_id(post_id)
        return self.posts.pop(pid, None) if pid else None


class BrokenPostRepository:
    """Every call fails the way a lost database connection would."""

    async def _fail(self, *args, **kwargs):
        raise ConnectionError("database unavailable")

    list_posts = get_post = create_post = update_post = delete_post = _fail


@pytest.fixture
def repo():
    return InMemoryPostRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_post_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_post_repository] = lambda: BrokenPostRepository()
    yield TestClient(app)
    app.dependency_overrides.clear()
