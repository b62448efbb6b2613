"""Search and convert services wired together."""

from dataclasses import dataclass
from typing import Optional

from ..config import Config, config as default_config
from ..errors import SearchError
from ..tools.base import PropertyListNormalizer, TextSearcher
from ..tools.grep_searcher import GrepSearcher
from ..tools.plutil_normalizer import PlutilNormalizer
from .convert_service import ConvertService, ConvertState
from .search_service import SearchService


@dataclass
class Workspace:
    """One search view and one convert view sharing the selected file."""
    search: SearchService
    convert: ConvertService

    @classmethod
    def create(
        cls,
        searcher: Optional[TextSearcher] = None,
        normalizer: Optional[PropertyListNormalizer] = None,
        config: Optional[Config] = None,
    ) -> "Workspace":
        """Build a workspace, defaulting to the grep and plutil tools."""
        config = config or default_config
        return cls(
            search=SearchService(searcher or GrepSearcher(), config=config),
            convert=ConvertService(normalizer or PlutilNormalizer(), config=config),
        )

    def use_selected_result(self) -> ConvertState:
        """
        Hand the selected search hit to the convert view.

        Raises:
            SearchError: If no hit is selected
            FormatError: If the hit is not a strings file
        """
        hit = self.search.state.selected
        if hit is None:
            raise SearchError("No search result selected")
        return self.convert.select_file(hit.file_path)

    async def close(self) -> None:
        await self.search.close()
