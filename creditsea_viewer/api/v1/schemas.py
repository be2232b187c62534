"""Pydantic schemas for the JSON view endpoint"""

from pydantic import BaseModel
from typing import List, Optional


class ReportRowSchema(BaseModel):
    """Single entry of the report list"""

    report_id: str
    name: str
    created_date: str
    credit_score: int
    score_band: str
    selected: bool


class ReportListSchema(BaseModel):
    count: int
    count_label: str
    rows: List[ReportRowSchema]
    empty_message: Optional[str] = None


class SummarySchema(BaseModel):
    total_accounts: int
    active_accounts: int
    closed_accounts: int
    current_balance_amount: str
    secured_accounts_amount: str
    unsecured_accounts_amount: str
    last_seven_days_credit_enquiries: int
    enquiries_elevated: bool


class AccountRowSchema(BaseModel):
    """Single ledger row with overdue severity"""

    type: str
    bank: str
    account_number: str
    address: str
    current_balance: str
    amount_overdue: str
    overdue_severity: str


class ReportDetailSchema(BaseModel):
    report_id: str
    name: str
    mobile_phone: str
    pan: str
    report_date: str
    credit_score: int
    score_band: str
    summary: SummarySchema
    accounts: List[AccountRowSchema]
    empty_accounts_message: Optional[str] = None


class PlaceholderSchema(BaseModel):
    message: str
    hint: str


class NotificationSchema(BaseModel):
    id: int
    kind: str
    message: str
    is_error: bool
    ttl_ms: int


class UploadControlSchema(BaseModel):
    busy: bool
    disabled: bool
    accept: str
    busy_message: Optional[str] = None


class DashboardResponse(BaseModel):
    """Response for GET /api/view"""

    search_query: str
    upload: UploadControlSchema
    report_list: ReportListSchema
    detail: Optional[ReportDetailSchema] = None
    placeholder: Optional[PlaceholderSchema] = None
    notifications: List[NotificationSchema]
