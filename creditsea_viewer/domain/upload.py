"""Upload coordinator - lifecycle of a single report file upload"""

import logging
import time

from creditsea_viewer.domain.exceptions import ReportUploadError
from creditsea_viewer.domain.models import NotificationKind, UploadFile
from creditsea_viewer.domain.notifications import NotificationCenter
from creditsea_viewer.domain.store import ReportStore
from creditsea_viewer.infrastructure.clients.reports import ReportsClient
from creditsea_viewer.infrastructure.observability.logging import log_upload
from creditsea_viewer.infrastructure.observability.metrics import (
    record_upload,
    upload_latency_histogram,
    uploads_in_flight_gauge,
)

logger = logging.getLogger(__name__)


class UploadCoordinator:
    """
    Forwards a user-picked file to the backend and refreshes the store.

    The busy flag is advisory: the file input renders disabled while it is
    set, but concurrent calls from other paths are neither queued nor
    rejected.
    """

    def __init__(self, client: ReportsClient, store: ReportStore, notifications: NotificationCenter):
        self.client = client
        self.store = store
        self.notifications = notifications
        self._in_flight = 0

    @property
    def busy(self) -> bool:
        return self._in_flight > 0

    async def upload(self, file: UploadFile) -> bool:
        """
        Single best-effort upload attempt, no retry.

        Flow:
        1. Mark busy
        2. POST the bytes unchanged as multipart field "file"
        3. Success: UploadSucceeded, reload the store
        4. Failure: UploadFailed, collection untouched
        5. Busy released as soon as the backend answers, on both paths

        Returns: True if the backend accepted the file
        """
        self._in_flight += 1
        uploads_in_flight_gauge.inc()
        start_time = time.time()

        try:
            with upload_latency_histogram.time():
                await self.client.upload_report(file)
        except ReportUploadError as e:
            logger.error(f"Report upload failed: {e}", extra={"upload_filename": file.filename})
            self.notifications.notify(NotificationKind.UPLOAD_FAILED)
            record_upload(False)
            log_upload(file.filename, False, (time.time() - start_time) * 1000)
            return False
        finally:
            self._in_flight -= 1
            uploads_in_flight_gauge.dec()

        self.notifications.notify(NotificationKind.UPLOAD_SUCCEEDED)
        record_upload(True)
        log_upload(file.filename, True, (time.time() - start_time) * 1000)

        # No picked-file state to clear here: the redirect back to the dashboard
        # re-renders an empty file input.
        await self.store.load()
        return True
