import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple

import frontmatter
import yaml
from pydantic import ValidationError

from app.repos.posts_repo import FilesystemPostsRepo, slug_from_path
from app.schemas.blog import (
    PostDetail,
    PostFrontMatter,
    PostSummary,
    RouteParams,
    RouteSlug,
)
from app.services.markdown_renderer import render_markdown

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200


class MalformedMetadataError(ValueError):
    """Raised when a post's front-matter cannot be turned into PostFrontMatter."""

    def __init__(self, slug: str, reason: str):
        super().__init__(f"Malformed metadata in post {slug!r}: {reason}")
        self.slug = slug
        self.reason = reason


class PostsService:
    def __init__(self, repo: FilesystemPostsRepo, sanitize_html: bool = False):
        self.repo = repo
        self.sanitize_html = sanitize_html

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for path in self.repo.list_post_files():
            slug = slug_from_path(path)
            try:
                metadata, body = parse_post(read_markdown(path, slug), slug)
            except MalformedMetadataError as e:
                logger.warning(f"Skipping post {slug}: {e.reason}")
                continue

            if not metadata.published:
                continue
            posts.append(build_summary(slug, metadata, body))

        return sort_posts(posts)

    def get_post(self, slug: str) -> Optional[PostDetail]:
        path = self.repo.get_post_path(slug)
        if path is None:
            return None

        metadata, body = parse_post(read_markdown(path, slug), slug)
        summary = build_summary(slug, metadata, body)
        return PostDetail(
            **summary.model_dump(),
            content=render_markdown(body, sanitize=self.sanitize_html),
        )

    def list_slugs(self) -> List[RouteParams]:
        return [
            RouteParams(params=RouteSlug(slug=slug)) for slug in self.repo.list_slugs()
        ]


def read_markdown(path: Path, slug: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedMetadataError(slug, "file is not valid UTF-8") from e


def parse_post(raw: str, slug: str) -> Tuple[PostFrontMatter, str]:
    """Split a markdown file into validated front-matter and its body."""
    try:
        parsed = frontmatter.loads(raw)
    except yaml.YAMLError as e:
        raise MalformedMetadataError(slug, f"invalid YAML front-matter ({e})") from e

    try:
        metadata = PostFrontMatter.model_validate(parsed.metadata or {})
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise MalformedMetadataError(slug, f"invalid fields: {fields}") from e

    return metadata, parsed.content


def build_summary(slug: str, metadata: PostFrontMatter, body: str) -> PostSummary:
    return PostSummary(
        slug=slug,
        title=metadata.title,
        description=metadata.description,
        date=metadata.date,
        tags=metadata.tags,
        published=metadata.published,
        excerpt=metadata.description,
        readingTime=calculate_reading_time(body),
    )


def sort_posts(posts: List[PostSummary]) -> List[PostSummary]:
    """Newest first by date string; equal dates fall back to slug, undated last."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    dated = [p for p in by_slug if p.date]
    undated = [p for p in by_slug if not p.date]
    # sort is stable, so slug order survives within equal dates
    dated.sort(key=lambda p: p.date, reverse=True)
    return dated + undated


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min"
