"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from typing import Iterator, List
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from creditsea_viewer.api.main import create_app
from creditsea_viewer.domain.models import BasicDetails, CreditAccount, CreditReport, ReportSummary
from creditsea_viewer.domain.notifications import NotificationCenter
from creditsea_viewer.domain.state import ViewerState, create_viewer_state


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_report(
    report_id: str = "r1",
    name: str = "Asha Rao",
    pan: str = "ABCDE1234F",
    credit_score: int = 782,
    accounts: List[CreditAccount] | None = None,
    enquiries: int = 1,
    created_at: datetime | None = None,
) -> CreditReport:
    """Build a report with sensible defaults"""
    if accounts is None:
        accounts = [
            CreditAccount(
                type="Credit Card",
                bank="ICICI Bank",
                account_number="CC44556677",
                address="12 MG Road, Bengaluru",
                amount_overdue=0,
                current_balance=245000,
            )
        ]
    return CreditReport(
        id=report_id,
        basic_details=BasicDetails(
            name=name,
            mobile_phone="9876543210",
            pan=pan,
            credit_score=credit_score,
        ),
        report_summary=ReportSummary(
            total_accounts=len(accounts),
            active_accounts=len(accounts),
            closed_accounts=0,
            current_balance_amount=1245000,
            secured_accounts_amount=1000000,
            unsecured_accounts_amount=245000,
            last_seven_days_credit_enquiries=enquiries,
        ),
        credit_accounts=tuple(accounts),
        created_at=created_at or datetime(2024, 9, 23, 10, 15, tzinfo=timezone.utc),
    )


def report_payload(report_id: str = "r1", name: str = "Asha Rao", pan: str = "ABCDE1234F") -> dict:
    """Backend JSON shape of a single report"""
    return {
        "_id": report_id,
        "basicDetails": {
            "name": name,
            "mobilePhone": "9876543210",
            "pan": pan,
            "creditScore": 782,
        },
        "reportSummary": {
            "totalAccounts": 2,
            "activeAccounts": 1,
            "closedAccounts": 1,
            "currentBalanceAmount": 1245000,
            "securedAccountsAmount": 1000000,
            "unsecuredAccountsAmount": 245000.5,
            "lastSevenDaysCreditEnquiries": 3,
        },
        "creditAccounts": [
            {
                "type": "Home Loan",
                "bank": "HDFC Bank",
                "accountNumber": "HL00112233",
                "address": "12 MG Road, Bengaluru",
                "amountOverdue": 0,
                "currentBalance": 1000000,
            },
            {
                "type": "Credit Card",
                "bank": "ICICI Bank",
                "accountNumber": "CC44556677",
                "address": "12 MG Road, Bengaluru",
                "amountOverdue": 12000,
                "currentBalance": 245000.5,
            },
        ],
        "createdAt": "2024-09-23T10:15:00.000Z",
    }


@pytest.fixture
def sample_reports() -> List[CreditReport]:
    """Two reports: one matched by name, one by PAN"""
    return [
        make_report("r1", name="Asha Rao", pan="ABCDE1234F", credit_score=782),
        make_report("r2", name="Bala", pan="XYZPQ9999L", credit_score=612, enquiries=4),
    ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifications(clock: FakeClock) -> NotificationCenter:
    return NotificationCenter(success_ttl=2.0, error_ttl=4.0, clock=clock)


@pytest.fixture
def reports_client(sample_reports: List[CreditReport]) -> AsyncMock:
    """Backend client double returning the sample collection"""
    client = AsyncMock()
    client.list_reports.return_value = sample_reports
    client.upload_report.return_value = None
    return client


@pytest.fixture
def viewer_state(reports_client: AsyncMock, notifications: NotificationCenter) -> ViewerState:
    return create_viewer_state(client=reports_client, notifications=notifications)


@pytest.fixture
def client(viewer_state: ViewerState) -> Iterator[TestClient]:
    """Viewer app test client; start-up performs the initial load"""
    app = create_app(viewer_state)
    with TestClient(app) as test_client:
        yield test_client
