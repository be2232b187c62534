"""Presentation-only bucketing of report values into ordered categories"""

from enum import Enum


class ScoreBand(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class OverdueSeverity(str, Enum):
    CLEAR = "clear"
    MILD = "mild"
    SEVERE = "severe"


GOOD_SCORE_THRESHOLD = 750
FAIR_SCORE_THRESHOLD = 650
SEVERE_OVERDUE_THRESHOLD = 10_000
ELEVATED_ENQUIRY_THRESHOLD = 2


def classify_credit_score(score: int) -> ScoreBand:
    """
    Map a credit score to a display band.

    Bands (lower bounds inclusive):
    - 750+:    good
    - 650-749: fair
    - <650:    poor
    """
    if score >= GOOD_SCORE_THRESHOLD:
        return ScoreBand.GOOD
    elif score >= FAIR_SCORE_THRESHOLD:
        return ScoreBand.FAIR
    else:
        return ScoreBand.POOR


def classify_overdue_amount(amount: float) -> OverdueSeverity:
    """
    Map an account's overdue amount to a severity.

    - 0:            clear
    - 0 < x < 10k:  mild
    - 10k+:         severe
    """
    if amount == 0:
        return OverdueSeverity.CLEAR
    elif amount < SEVERE_OVERDUE_THRESHOLD:
        return OverdueSeverity.MILD
    else:
        return OverdueSeverity.SEVERE


def is_enquiry_count_elevated(enquiries: int) -> bool:
    """More than two enquiries in the last seven days is flagged"""
    return enquiries > ELEVATED_ENQUIRY_THRESHOLD
