"""Search workflow: project selection, background search and previews."""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config import Config, config as default_config
from ..errors import LocalizableError, SearchCancelledError, SearchError
from ..models.search_result import FilePreview, SearchHit
from ..search.results import find_dependency_dir, load_preview, search_project
from ..tools.base import TextSearcher

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    """Everything the search view shows."""
    project_dir: Optional[Path] = None
    dependency_dir: Optional[Path] = None
    needle: str = ""
    results: List[SearchHit] = field(default_factory=list)
    selected: Optional[SearchHit] = None
    preview: Optional[FilePreview] = None
    is_searching: bool = False
    status: str = ""

    @property
    def can_search(self) -> bool:
        return self.dependency_dir is not None and not self.is_searching


class SearchService:
    """
    Runs project searches off the event loop and applies their results.

    Only one search is ever in flight. Starting a new one cancels the
    running search, and searches still waiting their turn give way to the
    newest request, so only the latest search applies results.
    """

    def __init__(self, searcher: TextSearcher, config: Optional[Config] = None):
        self.searcher = searcher
        self.config = config or default_config
        self.state = SearchState()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()
        self._generation = 0

    def select_project(self, project_dir: str) -> SearchState:
        """Select a project folder and locate its dependency folder."""
        path = Path(project_dir)
        self.state.project_dir = path
        self.state.dependency_dir = find_dependency_dir(str(path), self.config.dependency_dir_name)

        if self.state.dependency_dir is None:
            self.state.status = f"{self.config.dependency_dir_name} directory not found"
        else:
            self.state.status = f"Selected Project Folder: {path.name}"
        return self.state

    async def search(self, needle: str) -> List[SearchHit]:
        """
        Search the dependency folder for needle and store the hits.

        Raises:
            SearchError: If no dependency folder is selected or the tool fails
            SearchCancelledError: If a newer search replaced this one
        """
        root = self.state.dependency_dir
        if root is None:
            self.state.status = f"{self.config.dependency_dir_name} directory not found"
            raise SearchError(self.state.status)

        self._generation += 1
        generation = self._generation
        self._cancel_running()

        async with self._lock:
            if generation != self._generation:
                raise SearchCancelledError("Search replaced by a newer one")

            self.state.needle = needle
            self.state.results = []
            self.state.selected = None
            self.state.preview = None
            self.state.is_searching = True
            self.state.status = "Searching..."

            task = asyncio.create_task(
                asyncio.to_thread(search_project, str(root), needle, self.searcher)
            )
            self._task = task

            try:
                hits = await asyncio.shield(task)
            except asyncio.CancelledError:
                # The caller went away; stop the tool before giving up the lock
                self.searcher.cancel()
                await asyncio.wait([task])
                if generation == self._generation:
                    self.state.status = "Search cancelled"
                raise
            except LocalizableError as e:
                if generation == self._generation:
                    self.state.status = f"Search failed: {e}"
                raise
            finally:
                self._task = None
                self.state.is_searching = False

            if generation != self._generation:
                raise SearchCancelledError("Search replaced by a newer one")

            self.state.results = hits
            self.state.status = f"Found {len(hits)} files" if hits else "No matches found"
            return hits

    def select_result(self, hit: SearchHit) -> FilePreview:
        """
        Select a hit and load its highlighted preview.

        Raises:
            StorageError: If the file cannot be read
        """
        self.state.selected = hit
        try:
            preview = load_preview(hit.file_path, self.state.needle)
        except LocalizableError as e:
            self.state.preview = None
            self.state.status = str(e)
            raise

        self.state.preview = preview
        return preview

    async def close(self) -> None:
        """Cancel any in-flight search and wait for it to stop."""
        self._generation += 1
        task = self._task
        if task is None or task.done():
            return

        self._cancel_running()
        await asyncio.wait([task])
        self.state.is_searching = False
        self.state.status = "Search cancelled"

    def _cancel_running(self) -> None:
        task = self._task
        if task is None or task.done():
            return

        logger.info("Cancelling in-flight search for %r", self.state.needle)
        self.searcher.cancel()
