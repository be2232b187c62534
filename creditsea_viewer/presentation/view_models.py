"""Rendering contract between the report list and the detail pane"""

from dataclasses import dataclass, field
from typing import List, Optional

from creditsea_viewer.domain.classification import (
    classify_credit_score,
    classify_overdue_amount,
    is_enquiry_count_elevated,
)
from creditsea_viewer.domain.models import CreditReport, Notification
from creditsea_viewer.domain.state import ViewerState
from creditsea_viewer.utils.formatting import format_currency, format_short_date

NO_REPORTS_MESSAGE = "No reports available"
NO_MATCHES_MESSAGE = "No matching reports found"
NO_ACCOUNTS_MESSAGE = "No credit accounts found"
PLACEHOLDER_MESSAGE = "Select a report from the list to view details"
PLACEHOLDER_HINT = "You can search for specific reports using the search box"
BUSY_MESSAGE = "Processing..."


@dataclass
class ReportRowView:
    report_id: str
    name: str
    created_date: str
    credit_score: int
    score_band: str
    selected: bool


@dataclass
class ReportListView:
    count: int
    count_label: str
    rows: List[ReportRowView]
    empty_message: Optional[str]  # None when rows are shown


@dataclass
class SummaryView:
    total_accounts: int
    active_accounts: int
    closed_accounts: int
    current_balance_amount: str
    secured_accounts_amount: str
    unsecured_accounts_amount: str
    last_seven_days_credit_enquiries: int
    enquiries_elevated: bool


@dataclass
class AccountRowView:
    type: str
    bank: str
    account_number: str
    address: str
    current_balance: str
    amount_overdue: str
    overdue_severity: str


@dataclass
class ReportDetailView:
    report_id: str
    name: str
    mobile_phone: str
    pan: str
    report_date: str
    credit_score: int
    score_band: str
    summary: SummaryView
    accounts: List[AccountRowView]
    empty_accounts_message: Optional[str]  # set instead of an empty table


@dataclass
class PlaceholderView:
    message: str = PLACEHOLDER_MESSAGE
    hint: str = PLACEHOLDER_HINT


@dataclass
class NotificationView:
    id: int
    kind: str
    message: str
    is_error: bool
    ttl_ms: int


@dataclass
class UploadControlView:
    busy: bool
    disabled: bool
    accept: str
    busy_message: Optional[str]


@dataclass
class DashboardView:
    search_query: str
    upload: UploadControlView
    report_list: ReportListView
    detail: Optional[ReportDetailView]
    placeholder: Optional[PlaceholderView]
    notifications: List[NotificationView] = field(default_factory=list)


def build_report_list(
    reports: List[CreditReport],
    total_count: int,
    search_query: str,
    selected_id: Optional[str],
) -> ReportListView:
    """
    Rows for the already-filtered reports, in their given order.

    The empty message tells "nothing held at all" apart from "nothing
    matches the search text".
    """
    rows = [
        ReportRowView(
            report_id=report.id,
            name=report.basic_details.name,
            created_date=format_short_date(report.created_at),
            credit_score=report.basic_details.credit_score,
            score_band=classify_credit_score(report.basic_details.credit_score).value,
            selected=report.id == selected_id,
        )
        for report in reports
    ]

    empty_message = None
    if not rows:
        empty_message = NO_MATCHES_MESSAGE if search_query and total_count else NO_REPORTS_MESSAGE

    return ReportListView(
        count=len(rows),
        count_label=f"{len(rows)} reports",
        rows=rows,
        empty_message=empty_message,
    )


def build_report_detail(report: CreditReport) -> ReportDetailView:
    """Identity fields, summary aggregates and the account ledger of one report"""
    details = report.basic_details
    summary = report.report_summary

    accounts = [
        AccountRowView(
            type=acc.type,
            bank=acc.bank,
            account_number=acc.account_number,
            address=acc.address,
            current_balance=format_currency(acc.current_balance),
            amount_overdue=format_currency(acc.amount_overdue),
            overdue_severity=classify_overdue_amount(acc.amount_overdue).value,
        )
        for acc in report.credit_accounts
    ]

    return ReportDetailView(
        report_id=report.id,
        name=details.name,
        mobile_phone=details.mobile_phone,
        pan=details.pan,
        report_date=format_short_date(report.created_at),
        credit_score=details.credit_score,
        score_band=classify_credit_score(details.credit_score).value,
        summary=SummaryView(
            total_accounts=summary.total_accounts,
            active_accounts=summary.active_accounts,
            closed_accounts=summary.closed_accounts,
            current_balance_amount=format_currency(summary.current_balance_amount),
            secured_accounts_amount=format_currency(summary.secured_accounts_amount),
            unsecured_accounts_amount=format_currency(summary.unsecured_accounts_amount),
            last_seven_days_credit_enquiries=summary.last_seven_days_credit_enquiries,
            enquiries_elevated=is_enquiry_count_elevated(summary.last_seven_days_credit_enquiries),
        ),
        accounts=accounts,
        empty_accounts_message=None if accounts else NO_ACCOUNTS_MESSAGE,
    )


def build_notifications(notifications: List[Notification]) -> List[NotificationView]:
    return [
        NotificationView(
            id=n.id,
            kind=n.kind.value,
            message=n.message,
            is_error=n.kind.is_error,
            ttl_ms=int(n.ttl_seconds * 1000),
        )
        for n in notifications
    ]


def build_dashboard(
    state: ViewerState,
    accept: str,
    consume_notifications: bool = True,
) -> DashboardView:
    """
    Snapshot the viewer state into a view model.

    The filter is re-run on every call, so the list never shows a stale
    result. Notifications are consumed by default so each appears once.
    """
    selected = state.store.selected
    filtered = state.filtered_reports()

    notifications = state.notifications.consume() if consume_notifications else state.notifications.pending()

    return DashboardView(
        search_query=state.search_query,
        upload=UploadControlView(
            busy=state.busy,
            disabled=state.busy,
            accept=accept,
            busy_message=BUSY_MESSAGE if state.busy else None,
        ),
        report_list=build_report_list(
            filtered,
            total_count=len(state.store.reports),
            search_query=state.search_query,
            selected_id=selected.id if selected else None,
        ),
        detail=build_report_detail(selected) if selected else None,
        placeholder=None if selected else PlaceholderView(),
        notifications=build_notifications(notifications),
    )
