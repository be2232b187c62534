"""Report store - owns the report collection and the current selection"""

import logging
import time
from typing import Optional, Tuple

from creditsea_viewer.domain.exceptions import ReportNotFoundError, ReportServiceError
from creditsea_viewer.domain.models import CreditReport, NotificationKind
from creditsea_viewer.domain.notifications import NotificationCenter
from creditsea_viewer.infrastructure.clients.reports import ReportsClient
from creditsea_viewer.infrastructure.observability.logging import log_fetch
from creditsea_viewer.infrastructure.observability.metrics import record_fetch

logger = logging.getLogger(__name__)


class ReportStore:
    """
    Holds the report collection and at most one selected report.

    The collection is only ever replaced whole by load(); the selection is
    only changed by select() or re-resolved after a replacement.

    Overlapping loads are tagged with increasing sequence numbers. A response
    is applied only if no newer request has been applied already, so a slow
    stale response can never overwrite a fresher collection.
    """

    def __init__(self, client: ReportsClient, notifications: NotificationCenter):
        self.client = client
        self.notifications = notifications
        self._reports: Tuple[CreditReport, ...] = ()
        self._selected: Optional[CreditReport] = None
        self._issued_seq = 0
        self._applied_seq = 0

    @property
    def reports(self) -> Tuple[CreditReport, ...]:
        return self._reports

    @property
    def selected(self) -> Optional[CreditReport]:
        return self._selected

    def get(self, report_id: str) -> CreditReport:
        """
        Look up a report in the current collection.

        Raises:
            ReportNotFoundError: If no report with this id is held
        """
        for report in self._reports:
            if report.id == report_id:
                return report
        raise ReportNotFoundError(f"Report {report_id} is not in the current collection")

    async def load(self) -> bool:
        """
        Fetch the full collection and replace the held one.

        On failure the collection is left as-is and a FetchFailed
        notification is raised. Never raises and never retries.

        Returns: True if the fetched collection was applied
        """
        self._issued_seq += 1
        seq = self._issued_seq
        start_time = time.time()

        try:
            reports = await self.client.list_reports()
        except ReportServiceError as e:
            logger.error(f"Report fetch failed: {e}", extra={"sequence": seq})
            self.notifications.notify(NotificationKind.FETCH_FAILED)
            record_fetch("failed")
            log_fetch("failed", None, (time.time() - start_time) * 1000, seq)
            return False

        duration_ms = (time.time() - start_time) * 1000

        if seq < self._applied_seq:
            logger.info(
                "Discarding stale report fetch",
                extra={"sequence": seq, "applied_sequence": self._applied_seq},
            )
            record_fetch("stale")
            log_fetch("stale", len(reports), duration_ms, seq)
            return False

        self._replace(tuple(reports))
        self._applied_seq = seq
        record_fetch("applied", len(self._reports))
        log_fetch("applied", len(self._reports), duration_ms, seq)
        return True

    def select(self, report: CreditReport) -> None:
        """Make the given report, taken from the current collection, the selection"""
        self._selected = report

    def _replace(self, reports: Tuple[CreditReport, ...]) -> None:
        self._reports = reports

        if self._selected is None:
            return

        # Point the selection at the fresh instance, or drop it if gone
        selected_id = self._selected.id
        self._selected = next((r for r in reports if r.id == selected_id), None)
