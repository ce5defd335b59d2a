import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


class FilesystemPostsRepo:
    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory {self.content_dir} does not exist")
            return []
        return sorted(
            path
            for path in self.content_dir.rglob("*")
            if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES
        )

    def relative_path(self, path: Path) -> str:
        return path.relative_to(self.content_dir).as_posix()

    def slug_for(self, path: Path) -> str:
        """`a/index.md` -> `/a/`, `a/b.md` -> `/a/b/`."""
        parts = list(path.relative_to(self.content_dir).with_suffix("").parts)
        if parts and parts[-1] == "index":
            parts.pop()
        if not parts:
            return "/"
        return f"/{'/'.join(parts)}/"
