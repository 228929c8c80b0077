import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class FilesystemPostsRepo:
    def __init__(self, content_dir: Path | str):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.debug(f"Content directory {self.content_dir} does not exist")
            return []
        return sorted(
            (
                path
                for path in self.content_dir.iterdir()
                if path.is_file() and path.name.endswith(MARKDOWN_SUFFIX)
            ),
            key=lambda path: path.name,
        )

    def list_slugs(self) -> List[str]:
        return [slug_from_path(path) for path in self.list_post_files()]

    def get_post_path(self, slug: str) -> Optional[Path]:
        if not self._is_safe_slug(slug) or not self.content_dir.is_dir():
            return None
        path = self.content_dir / f"{slug}{MARKDOWN_SUFFIX}"
        if not path.is_file():
            return None
        return path

    @staticmethod
    def _is_safe_slug(slug: str) -> bool:
        if not slug or slug in (".", ".."):
            return False
        return "/" not in slug and "\\" not in slug and "\x00" not in slug


def slug_from_path(path: Path) -> str:
    return path.name.removesuffix(MARKDOWN_SUFFIX)
