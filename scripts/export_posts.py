import argparse
import json
import logging
from pathlib import Path

from app.repos.posts_repo import FilesystemPostsRepo
from app.services.posts_service import MalformedMetadataError, PostsService
from app.settings import settings

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "public/blog-data"


def export_posts(service: PostsService, output_dir: Path) -> int:
    """Write the post index, route list and one detail file per listed post."""
    posts_dir = output_dir / "posts"
    posts_dir.mkdir(parents=True, exist_ok=True)

    summaries = service.list_posts()
    _write_json(output_dir / "index.json", [p.model_dump() for p in summaries])
    _write_json(
        output_dir / "slugs.json", [r.model_dump() for r in service.list_slugs()]
    )

    written = 0
    for summary in summaries:
        try:
            post = service.get_post(summary.slug)
        except MalformedMetadataError as e:
            logger.warning(f"Skipping export of {summary.slug}: {e.reason}")
            continue
        if post is None:
            continue
        _write_json(posts_dir / f"{post.slug}.json", post.model_dump())
        written += 1

    logger.info(f"Exported {written} posts to {output_dir}")
    return written


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    arg_parser = argparse.ArgumentParser(description="Export blog posts as JSON")
    arg_parser.add_argument("--content-dir", default=settings.CONTENT_DIR)
    arg_parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR)
    args = arg_parser.parse_args()

    posts_service = PostsService(
        FilesystemPostsRepo(args.content_dir), sanitize_html=settings.SANITIZE_HTML
    )
    try:
        export_posts(posts_service, Path(args.output_dir))
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        raise SystemExit(1)
