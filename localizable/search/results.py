"""Project search: delegate to the text search tool and post-process its output."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..config import config
from ..errors import SearchError, StorageError
from ..models.search_result import FilePreview, SearchHit
from ..tools.base import TextSearcher
from .locator import find_spans

logger = logging.getLogger(__name__)

BINARY_FILE_PREFIX = "Binary file "


def parse_search_output(raw: str, extension: str = ".strings") -> List[SearchHit]:
    """
    Turn line-oriented search tool output into one hit per file.

    Each line is trimmed, a leading binary-match marker is removed and the
    line is cut right after the first occurrence of the extension to get the
    file path. Hits are deduplicated by path in first-seen order.
    """
    hits: Dict[str, SearchHit] = {}

    for line in raw.splitlines():
        line = line.strip()
        if not line:
            continue

        binary = line.startswith(BINARY_FILE_PREFIX)
        if binary:
            line = line[len(BINARY_FILE_PREFIX):]

        marker = line.find(extension)
        if marker == -1:
            logger.debug("Skipping search output line without %s: %r", extension, line)
            continue

        cut = marker + len(extension)
        file_path = line[:cut]
        if file_path in hits:
            continue

        snippet = ""
        if not binary and line[cut:cut + 1] == ":":
            snippet = line[cut + 1:].strip()

        hits[file_path] = SearchHit(file_path=file_path, snippet=snippet)

    return list(hits.values())


def search_project(root_dir: str, needle: str, searcher: TextSearcher) -> List[SearchHit]:
    """
    Search every strings file below root_dir for needle.

    Returns:
        Deduplicated hits; an empty list when nothing matches

    Raises:
        SearchError: If root_dir is not a directory or the tool fails
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise SearchError(f"Search folder not found: {root}")

    if not needle:
        return []

    raw = searcher.search(str(root), needle)
    hits = parse_search_output(raw, config.strings_extension)
    logger.info("Search for %r in %s found %d files", needle, root, len(hits))
    return hits


def find_dependency_dir(project_dir: str, name: Optional[str] = None) -> Optional[Path]:
    """Return the dependency folder inside project_dir, or None if it does not exist."""
    candidate = Path(project_dir) / (name or config.dependency_dir_name)
    if candidate.exists():
        return candidate
    return None


def load_preview(file_path: str, needle: str) -> FilePreview:
    """
    Load a hit's content and locate needle in it.

    Content that is not valid UTF-8 is decoded with replacement characters.

    Raises:
        StorageError: If the file cannot be read
    """
    path = Path(file_path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise StorageError(f"Unable to read file content: {e}") from e

    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("%s is not valid UTF-8, decoding lossily", path)
        content = data.decode("utf-8", errors="replace")

    return FilePreview(file_path=str(path), content=content, spans=find_spans(content, needle))
