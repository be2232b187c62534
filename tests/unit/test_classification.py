"""Unit tests for score bands, overdue severity and enquiry alerts"""

from creditsea_viewer.domain.classification import (
    OverdueSeverity,
    ScoreBand,
    classify_credit_score,
    classify_overdue_amount,
    is_enquiry_count_elevated,
)


def test_credit_score_band_boundaries():
    """Lower bound of each band is inclusive"""
    assert classify_credit_score(750) == ScoreBand.GOOD
    assert classify_credit_score(749) == ScoreBand.FAIR
    assert classify_credit_score(650) == ScoreBand.FAIR
    assert classify_credit_score(649) == ScoreBand.POOR


def test_credit_score_band_extremes():
    assert classify_credit_score(900) == ScoreBand.GOOD
    assert classify_credit_score(300) == ScoreBand.POOR
    assert classify_credit_score(0) == ScoreBand.POOR


def test_overdue_severity_boundaries():
    assert classify_overdue_amount(0) == OverdueSeverity.CLEAR
    assert classify_overdue_amount(9999) == OverdueSeverity.MILD
    assert classify_overdue_amount(10000) == OverdueSeverity.SEVERE


def test_overdue_severity_fractional_amounts():
    assert classify_overdue_amount(0.0) == OverdueSeverity.CLEAR
    assert classify_overdue_amount(0.5) == OverdueSeverity.MILD
    assert classify_overdue_amount(9999.99) == OverdueSeverity.MILD


def test_enquiry_alert_threshold():
    assert is_enquiry_count_elevated(0) is False
    assert is_enquiry_count_elevated(2) is False
    assert is_enquiry_count_elevated(3) is True


def test_band_values_are_display_strings():
    assert ScoreBand.GOOD.value == "good"
    assert OverdueSeverity.SEVERE.value == "severe"
