"""Viewer state container owned by the top-level application"""

from dataclasses import dataclass, field
from typing import List

from creditsea_viewer.domain.models import CreditReport
from creditsea_viewer.domain.notifications import NotificationCenter
from creditsea_viewer.domain.search import filter_reports
from creditsea_viewer.domain.store import ReportStore
from creditsea_viewer.domain.upload import UploadCoordinator
from creditsea_viewer.infrastructure.clients.reports import ReportsClient


@dataclass
class ViewerState:
    """All mutable UI state, threaded explicitly to routes and renderers"""

    store: ReportStore
    uploads: UploadCoordinator
    notifications: NotificationCenter
    search_query: str = field(default="")

    @property
    def busy(self) -> bool:
        return self.uploads.busy

    def filtered_reports(self) -> List[CreditReport]:
        """Fresh filter of the current collection by the current query"""
        return filter_reports(self.store.reports, self.search_query)


def create_viewer_state(
    client: ReportsClient | None = None,
    notifications: NotificationCenter | None = None,
) -> ViewerState:
    """Wire store, upload coordinator and notification channel around one client"""
    client = client or ReportsClient()
    notifications = notifications or NotificationCenter()
    store = ReportStore(client, notifications)
    uploads = UploadCoordinator(client, store, notifications)
    return ViewerState(store=store, uploads=uploads, notifications=notifications)
