"""
FastAPI router definitions for the API endpoints.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException, Query

from patchspace.api.dependencies import (
    get_list_files_uc,
    get_load_snapshot_uc,
    get_tools_handler,
)
from patchspace.api.schemas import (
    DiffLineSchema,
    DiffRequest,
    DiffResponse,
    ErrorResponse,
    FileInfo,
    FileListResponse,
    ProjectContextResponse,
    SessionInfo,
    SnapshotRequest,
    ToolSpecSchema,
)
from patchspace.exceptions import WorkspaceError
from patchspace.utils.diff import diff_lines, render_unified, summarize_diff

router = APIRouter()


@router.put(
    "/sessions/{session_id}/snapshot",
    response_model=SessionInfo,
    responses={400: {"model": ErrorResponse}},
)
def load_snapshot(session_id: str, body: SnapshotRequest):
    """
    Seed a session with a file snapshot, merging into any existing one.

    Args:
        session_id: Session identifier
        body: Snapshot files and optional display tree

    Returns:
        SessionInfo: Session summary after the merge

    Raises:
        HTTPException: If the snapshot cannot be merged
    """
    try:
        files = [f.model_dump(by_alias=True) for f in body.files]
        session = get_load_snapshot_uc().execute(session_id, files, body.file_tree)
        return SessionInfo(**session.get_details())
    except WorkspaceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/sessions/{session_id}/context", response_model=ProjectContextResponse)
def project_context(session_id: str):
    """Markdown listing of the session's files, for prompt building."""
    context = get_load_snapshot_uc().project_context(session_id)
    return ProjectContextResponse(sessionId=session_id, context=context)


@router.get(
    "/sessions/{session_id}/files",
    response_model=FileListResponse,
    responses={400: {"model": ErrorResponse}},
)
def list_files(
    session_id: str,
    path: Optional[str] = Query(None, description="Directory prefix to list"),
):
    """
    List files in a session workspace.

    Args:
        session_id: Session identifier
        path: Optional directory prefix

    Returns:
        FileListResponse: Files under the prefix

    Raises:
        HTTPException: If listing files fails
    """
    try:
        files = get_list_files_uc().execute(session_id, path)
        return FileListResponse(
            files=[FileInfo.from_entity(f) for f in files], count=len(files)
        )
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/sessions/{session_id}/tools", response_model=list[ToolSpecSchema])
def available_tools(session_id: str):
    """Tool specifications an agent can call against the session."""
    return [ToolSpecSchema(**spec) for spec in get_tools_handler(session_id).available_tools()]


@router.post(
    "/sessions/{session_id}/tools/{tool_name}",
    responses={404: {"model": ErrorResponse}},
)
def call_tool(
    session_id: str,
    tool_name: str,
    arguments: dict[str, Any] = Body(default_factory=dict),
) -> dict[str, Any]:
    """
    Run one workspace tool call.

    Failures of the operation itself come back with ``success: false`` and a
    200 status; only unknown tools are an HTTP error.
    """
    try:
        return get_tools_handler(session_id).run(tool_name, arguments)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/diff", response_model=DiffResponse)
def diff_texts(body: DiffRequest):
    """Line diff between two texts."""
    lines = list(diff_lines(body.old_text, body.new_text))
    summary = summarize_diff(lines)
    return DiffResponse(
        lines=[DiffLineSchema.from_entity(line) for line in lines],
        additions=summary.additions,
        removals=summary.removals,
        unified=render_unified(lines),
    )
