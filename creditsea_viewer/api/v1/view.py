"""GET /api/view - JSON projection of the dashboard"""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Query

from creditsea_viewer.api.dependencies import get_accepted_extension, get_viewer_state
from creditsea_viewer.api.v1.schemas import DashboardResponse
from creditsea_viewer.domain.state import ViewerState
from creditsea_viewer.presentation.view_models import build_dashboard

router = APIRouter()


@router.get("/view", response_model=DashboardResponse)
async def get_view(
    q: Optional[str] = Query(None, description="Search text matched against name and PAN"),
    state: ViewerState = Depends(get_viewer_state),
    accept: str = Depends(get_accepted_extension),
):
    """
    Same view model the HTML page renders.

    Notifications are reported without being consumed, so polling this
    endpoint does not swallow toasts meant for the page.
    """
    if q is not None:
        state.search_query = q

    view = build_dashboard(state, accept=accept, consume_notifications=False)
    return DashboardResponse.model_validate(asdict(view))
