"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class BasicDetails:
    """Identity fields of a report subject"""

    name: str
    mobile_phone: str
    pan: str  # tax identifier, secondary search key
    credit_score: int


@dataclass(frozen=True)
class ReportSummary:
    """Aggregate counters and amounts for a report"""

    total_accounts: int
    active_accounts: int
    closed_accounts: int
    current_balance_amount: float
    secured_accounts_amount: float
    unsecured_accounts_amount: float
    last_seven_days_credit_enquiries: int


@dataclass(frozen=True)
class CreditAccount:
    """Single ledger row of a report"""

    type: str
    bank: str
    account_number: str
    address: str
    amount_overdue: float
    current_balance: float


@dataclass(frozen=True)
class CreditReport:
    """Parsed credit report as served by the backend"""

    id: str
    basic_details: BasicDetails
    report_summary: ReportSummary
    credit_accounts: Tuple[CreditAccount, ...]  # server order
    created_at: datetime


@dataclass(frozen=True)
class UploadFile:
    """File picked by the user, forwarded to the backend as-is"""

    filename: str
    content: bytes
    content_type: Optional[str] = None


class NotificationKind(str, Enum):
    """Kinds of messages on the notification channel"""

    FETCH_FAILED = "FetchFailed"
    UPLOAD_FAILED = "UploadFailed"
    UPLOAD_SUCCEEDED = "UploadSucceeded"

    @property
    def is_error(self) -> bool:
        return self is not NotificationKind.UPLOAD_SUCCEEDED


@dataclass
class Notification:
    """Transient user-visible message"""

    kind: NotificationKind
    message: str
    raised_at: float  # monotonic seconds
    ttl_seconds: float  # counted from the first render
    id: int = field(default=0)
    shown_at: Optional[float] = None
