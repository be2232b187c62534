"""Report backend HTTP client for listing and uploading credit reports"""

import math
import httpx
from datetime import datetime
from typing import Any, Dict, List
from creditsea_viewer.domain.models import (
    BasicDetails,
    CreditAccount,
    CreditReport,
    ReportSummary,
    UploadFile,
)
from creditsea_viewer.domain.exceptions import (
    InvalidReportDataError,
    ReportFetchError,
    ReportUploadError,
)
from creditsea_viewer.config import settings


def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"createdAt must be an ISO-8601 string, got {type(value).__name__}")
    # fromisoformat rejects a trailing "Z" before Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _amount(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("Amount must be a number, got bool")
    amount = value if isinstance(value, (int, float)) else float(value)
    if not math.isfinite(amount) or amount < 0:
        raise ValueError(f"Amount must be a finite non-negative number, got {value!r}")
    return amount


def parse_report(data: Dict[str, Any]) -> CreditReport:
    """
    Decode one report object from the backend's JSON shape.

    Raises:
        KeyError, ValueError, TypeError: On missing or malformed fields
    """
    report_id = data["_id"] if "_id" in data else data["id"]
    details = data["basicDetails"]
    summary = data["reportSummary"]

    return CreditReport(
        id=str(report_id),
        basic_details=BasicDetails(
            name=str(details["name"]),
            mobile_phone=str(details["mobilePhone"]),
            pan=str(details["pan"]),
            credit_score=int(details["creditScore"]),
        ),
        report_summary=ReportSummary(
            total_accounts=int(summary["totalAccounts"]),
            active_accounts=int(summary["activeAccounts"]),
            closed_accounts=int(summary["closedAccounts"]),
            current_balance_amount=_amount(summary["currentBalanceAmount"]),
            secured_accounts_amount=_amount(summary["securedAccountsAmount"]),
            unsecured_accounts_amount=_amount(summary["unsecuredAccountsAmount"]),
            last_seven_days_credit_enquiries=int(summary["lastSevenDaysCreditEnquiries"]),
        ),
        credit_accounts=tuple(
            CreditAccount(
                type=str(acc["type"]),
                bank=str(acc["bank"]),
                account_number=str(acc["accountNumber"]),
                address=str(acc["address"]),
                amount_overdue=_amount(acc["amountOverdue"]),
                current_balance=_amount(acc["currentBalance"]),
            )
            for acc in data["creditAccounts"]
        ),
        created_at=_parse_timestamp(data["createdAt"]),
    )


class ReportsClient:
    """Client for the report parsing/storage backend"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.backend_base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def list_reports(self) -> List[CreditReport]:
        """
        Fetch the full report collection in server order.

        Raises:
            ReportFetchError: On timeout, transport or HTTP errors
            InvalidReportDataError: On a payload that cannot be decoded
        """
        async with self._client() as client:
            try:
                response = await client.get(f"{self.base_url}/api/reports")
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise ReportFetchError(f"Report API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ReportFetchError(f"Report API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ReportFetchError(f"Report API unreachable: {e}") from e
            except ValueError as e:
                raise InvalidReportDataError(f"Report API returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise InvalidReportDataError("Report API returned a non-list payload")

        try:
            return [parse_report(item) for item in data]
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidReportDataError(f"Invalid report data from backend: {e}") from e

    async def upload_report(self, file: UploadFile) -> None:
        """
        Forward a report file as multipart field "file". The response body
        is ignored beyond its status.

        Raises:
            ReportUploadError: On timeout, transport or HTTP errors
        """
        files = {"file": (file.filename, file.content, file.content_type or "application/octet-stream")}
        async with self._client() as client:
            try:
                response = await client.post(f"{self.base_url}/api/upload", files=files)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise ReportUploadError(f"Upload timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ReportUploadError(f"Upload rejected: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ReportUploadError(f"Upload failed: {e}") from e
