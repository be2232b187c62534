"""Search filter over the report collection"""

from typing import Iterable, List
from creditsea_viewer.domain.models import CreditReport


def matches_query(report: CreditReport, query: str) -> bool:
    """True if query is empty or a case-insensitive substring of name or PAN"""
    if not query:
        return True

    needle = query.lower()
    details = report.basic_details
    return needle in details.name.lower() or needle in details.pan.lower()


def filter_reports(reports: Iterable[CreditReport], query: str) -> List[CreditReport]:
    """
    Narrow a collection to the reports matching a search query.

    Pure and stable: input order is preserved, nothing is re-sorted and
    nothing is cached, so callers evaluate it on every render.
    """
    return [report for report in reports if matches_query(report, query)]
