"""Unit tests for the upload coordinator"""

from creditsea_viewer.domain.exceptions import ReportFetchError, ReportUploadError
from creditsea_viewer.domain.models import NotificationKind, UploadFile
from creditsea_viewer.domain.state import create_viewer_state


XML_FILE = UploadFile(filename="report.xml", content=b"<INProfileResponse/>", content_type="text/xml")


async def test_successful_upload_reloads_once(reports_client, notifications):
    state = create_viewer_state(client=reports_client, notifications=notifications)
    assert state.uploads.busy is False

    accepted = await state.uploads.upload(XML_FILE)

    assert accepted is True
    assert state.uploads.busy is False
    assert reports_client.list_reports.await_count == 1
    assert [n.kind for n in notifications.pending()] == [NotificationKind.UPLOAD_SUCCEEDED]


async def test_bytes_forwarded_unchanged(reports_client, notifications):
    """No content validation: whatever was picked is sent"""
    state = create_viewer_state(client=reports_client, notifications=notifications)
    odd = UploadFile(filename="notes.txt", content=b"\x00\x01 not xml")

    await state.uploads.upload(odd)

    reports_client.upload_report.assert_awaited_once_with(odd)


async def test_busy_only_while_request_in_flight(reports_client, notifications):
    state = create_viewer_state(client=reports_client, notifications=notifications)
    observed = []

    async def record_busy(file):
        observed.append(state.uploads.busy)

    reports_client.upload_report.side_effect = record_busy

    await state.uploads.upload(XML_FILE)

    assert observed == [True]
    assert state.uploads.busy is False
    assert state.busy is False


async def test_success_notification_precedes_reload(reports_client, notifications, sample_reports):
    state = create_viewer_state(client=reports_client, notifications=notifications)
    seen_during_reload = []

    async def list_reports():
        seen_during_reload.extend(n.kind for n in notifications.pending())
        return sample_reports

    reports_client.list_reports.side_effect = list_reports

    await state.uploads.upload(XML_FILE)

    assert seen_during_reload == [NotificationKind.UPLOAD_SUCCEEDED]


async def test_transport_rejection_scenario(reports_client, notifications, sample_reports):
    """busy true->false, collection unchanged, one UploadFailed, zero reloads"""
    state = create_viewer_state(client=reports_client, notifications=notifications)
    await state.store.load()
    before = state.store.reports
    reports_client.list_reports.reset_mock()
    observed = []

    async def reject(file):
        observed.append(state.uploads.busy)
        raise ReportUploadError("Upload failed: connection refused")

    reports_client.upload_report.side_effect = reject

    accepted = await state.uploads.upload(XML_FILE)

    assert accepted is False
    assert observed == [True]
    assert state.uploads.busy is False
    assert state.store.reports == before
    assert [n.kind for n in notifications.pending()] == [NotificationKind.UPLOAD_FAILED]
    assert reports_client.list_reports.await_count == 0


async def test_reload_failure_after_upload_reports_both(reports_client, notifications):
    """Upload succeeded, refresh failed: two notifications, nothing raised"""
    reports_client.list_reports.side_effect = ReportFetchError("Report API error: 502")
    state = create_viewer_state(client=reports_client, notifications=notifications)

    accepted = await state.uploads.upload(XML_FILE)

    assert accepted is True
    kinds = [n.kind for n in notifications.pending()]
    assert kinds == [NotificationKind.UPLOAD_SUCCEEDED, NotificationKind.FETCH_FAILED]


async def test_slow_reload_keeps_success_notification(reports_client, notifications, clock, sample_reports):
    """A reload slower than the success TTL must not swallow the toast"""
    state = create_viewer_state(client=reports_client, notifications=notifications)

    async def slow_list_reports():
        clock.advance(3.0)
        return sample_reports

    reports_client.list_reports.side_effect = slow_list_reports

    await state.uploads.upload(XML_FILE)

    assert [n.kind for n in notifications.consume()] == [NotificationKind.UPLOAD_SUCCEEDED]
