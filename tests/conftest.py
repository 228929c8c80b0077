import textwrap
from pathlib import Path

import pytest

from app.repos.posts_repo import FilesystemPostsRepo
from app.services.posts_service import PostsService


def write_post(content_dir: Path, slug: str, raw: str) -> Path:
    """Write ``<slug>.md`` with dedented markdown (front-matter included)."""
    content_dir.mkdir(parents=True, exist_ok=True)
    path = content_dir / f"{slug}.md"
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path) -> Path:
    path = tmp_path / "content" / "blog"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_service(content_dir):
    def _make(sanitize_html: bool = False) -> PostsService:
        return PostsService(FilesystemPostsRepo(content_dir), sanitize_html=sanitize_html)

    return _make


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self, list_posts_return=None, get_post_return=None, list_slugs_return=None
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._list_slugs_return = list_slugs_return or []
        self.requested_slugs = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested_slugs.append(slug)
        return self._get_post_return

    def list_slugs(self):
        return self._list_slugs_return
