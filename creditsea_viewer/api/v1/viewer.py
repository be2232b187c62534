"""Browser-facing dashboard page and the actions it posts back"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request
from fastapi import UploadFile as FormFile
from fastapi.responses import HTMLResponse, RedirectResponse

from creditsea_viewer.api.dependencies import get_accepted_extension, get_request_id, get_viewer_state
from creditsea_viewer.domain.exceptions import ReportNotFoundError
from creditsea_viewer.domain.models import UploadFile
from creditsea_viewer.domain.state import ViewerState
from creditsea_viewer.presentation.renderer import render_dashboard_html
from creditsea_viewer.presentation.view_models import build_dashboard

router = APIRouter()


def _back_to_dashboard() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    q: Optional[str] = Query(None, description="Search text matched against name and PAN"),
    state: ViewerState = Depends(get_viewer_state),
    accept: str = Depends(get_accepted_extension),
):
    """
    Render the report list and the detail pane.

    A present `q` (even empty) replaces the search text; an absent one keeps it.
    """
    if q is not None:
        state.search_query = q

    view = build_dashboard(state, accept=accept)
    return HTMLResponse(render_dashboard_html(view))


@router.post("/upload")
async def upload_report(
    request: Request,
    file: Optional[FormFile] = File(None),
    state: ViewerState = Depends(get_viewer_state),
):
    """
    Forward the picked file to the backend and refresh the list.

    Flow:
    1. Nothing picked: no-op
    2. Hand bytes unchanged to the upload coordinator
    3. Coordinator raises the outcome notification and reloads on success
    4. Redirect back to the dashboard
    """
    if file is None or not file.filename:
        return _back_to_dashboard()

    content = await file.read()
    logging.info(
        "Upload received",
        extra={"request_id": get_request_id(request), "upload_filename": file.filename, "size_bytes": len(content)},
    )

    await state.uploads.upload(
        UploadFile(filename=file.filename, content=content, content_type=file.content_type)
    )
    return _back_to_dashboard()


@router.post("/reports/{report_id}/select")
async def select_report(report_id: str, request: Request, state: ViewerState = Depends(get_viewer_state)):
    """Select a report from the current collection"""
    try:
        report = state.store.get(report_id)
    except ReportNotFoundError as e:
        logging.warning(f"Selection rejected: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=404, detail="Report not found")

    state.store.select(report)
    return _back_to_dashboard()


@router.post("/reports/refresh")
async def refresh_reports(state: ViewerState = Depends(get_viewer_state)):
    """Re-fetch the report collection"""
    await state.store.load()
    return _back_to_dashboard()
