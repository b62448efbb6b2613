"""REST API routes."""

from dataclasses import asdict
from typing import Optional
from fastapi import APIRouter, Request, HTTPException
from pydantic import BaseModel

from ...config import config
from ...models.search_result import FilePreview
from ...search.results import load_preview

router = APIRouter()


# Request models
class ProjectRequest(BaseModel):
    project_dir: str


class SearchRequest(BaseModel):
    text: str
    project_dir: Optional[str] = None


class PreviewRequest(BaseModel):
    file_path: str
    text: str


class ConvertRequest(BaseModel):
    input_path: str
    output_path: Optional[str] = None


def _preview_to_dict(preview: FilePreview) -> dict:
    return {
        "file_path": preview.file_path,
        "match_count": preview.match_count,
        "spans": [[span.start, span.end] for span in preview.spans],
        "segments": [asdict(fragment) for fragment in preview.segments()],
    }


def _search_state_to_dict(state) -> dict:
    return {
        "project_dir": str(state.project_dir) if state.project_dir else None,
        "dependency_dir": str(state.dependency_dir) if state.dependency_dir else None,
        "is_searching": state.is_searching,
        "status": state.status,
    }


@router.get("/health")
async def health():
    """Report whether the external tools are available."""
    problems = config.validate()
    return {"status": "ok" if not problems else "degraded", "problems": problems}


# Search endpoints
@router.post("/project")
async def select_project(request: Request, body: ProjectRequest):
    """Select the project folder whose dependency folder is searched."""
    workspace = request.app.state.workspace
    state = workspace.search.select_project(body.project_dir)
    return _search_state_to_dict(state)


@router.post("/search")
async def search(request: Request, body: SearchRequest):
    """Search the selected project's strings files."""
    workspace = request.app.state.workspace

    if body.project_dir:
        workspace.search.select_project(body.project_dir)

    hits = await workspace.search.search(body.text)

    return {
        **_search_state_to_dict(workspace.search.state),
        "text": body.text,
        "results": [
            {"index": index, "file_path": hit.file_path, "file_name": hit.file_name, "snippet": hit.snippet}
            for index, hit in enumerate(hits)
        ],
    }


@router.post("/results/{index}")
async def select_result(request: Request, index: int):
    """Select a search result and return its highlighted preview."""
    workspace = request.app.state.workspace
    results = workspace.search.state.results

    if not 0 <= index < len(results):
        raise HTTPException(404, "Result not found")

    preview = workspace.search.select_result(results[index])
    return _preview_to_dict(preview)


@router.post("/results/selected/use")
async def use_selected_result(request: Request):
    """Hand the selected search result to the converter."""
    workspace = request.app.state.workspace

    if workspace.search.state.selected is None:
        raise HTTPException(409, "No search result selected")

    state = workspace.use_selected_result()
    return {"file_path": str(state.file_path), "status": state.status}


@router.post("/preview")
async def preview(body: PreviewRequest):
    """Highlight every occurrence of a text in any strings file."""
    return _preview_to_dict(load_preview(body.file_path, body.text))


# Convert endpoints
@router.post("/convert")
async def convert(request: Request, body: ConvertRequest):
    """Convert a binary .strings file to a plain-text strings table."""
    service = request.app.state.workspace.convert

    service.select_file(body.input_path)
    result = await service.convert(body.output_path)

    return {
        "source": str(result.source),
        "destination": str(result.destination),
        "entry_count": result.entry_count,
        "status": service.state.status,
    }
