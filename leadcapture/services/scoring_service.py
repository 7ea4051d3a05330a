"""
Scoring service - deterministic lead scoring, deal-value estimates and
priority tiers for each submission kind.

All functions are pure: lookup tables are read-only mappings passed in as
keyword defaults, and follow-up dates are computed from the supplied
creation timestamp.
"""
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from leadcapture.models.choices import Priority, Timeline


# =============================================================================
# CONSULTATION TABLES
# =============================================================================

BUDGET_SCORES: Mapping[str, int] = MappingProxyType({
    "under_5k": 20,
    "5k_15k": 40,
    "15k_50k": 70,
    "50k_100k": 90,
    "100k_plus": 100,
    "not_sure": 30,
})

TIMELINE_SCORES: Mapping[str, int] = MappingProxyType({
    "asap": 100,
    "1_month": 80,
    "3_months": 60,
    "6_months": 40,
    "1_year": 20,
    "flexible": 30,
})

BUSINESS_SIZE_SCORES: Mapping[str, int] = MappingProxyType({
    "1-10": 30,
    "11-50": 50,
    "51-200": 70,
    "201-500": 85,
    "500+": 100,
})

HIGH_VALUE_INDUSTRIES = frozenset({"technology", "finance", "healthcare", "manufacturing", "retail"})

BASE_LEAD_SCORE = 50
DEFAULT_TABLE_SCORE = 30
SERVICE_INTEREST_POINTS = 5
INDUSTRY_BONUS = 10

# =============================================================================
# SERVICE INQUIRY TABLES
# =============================================================================

SERVICE_BASE_VALUES: Mapping[str, int] = MappingProxyType({
    "ai_website": 15000,
    "smart_chatbot": 8000,
    "email_marketing": 5000,
    "social_media_automation": 6000,
    "custom_ai_solution": 25000,
    "consultation": 2000,
})

BUDGET_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "under_5k": 0.3,
    "5k_15k": 0.6,
    "15k_50k": 1.0,
    "50k_100k": 1.5,
    "100k_plus": 2.0,
    "not_sure": 0.8,
})

TIMELINE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "asap": 1.5,
    "1_month": 1.2,
    "3_months": 1.0,
    "6_months": 0.9,
    "1_year": 0.8,
    "flexible": 0.9,
})

ADDITIONAL_SERVICE_VALUES: Mapping[str, int] = MappingProxyType({
    "seo": 3000,
    "content_creation": 2000,
    "maintenance": 1500,
    "training": 1000,
    "analytics": 1000,
    "hosting": 500,
})

DEFAULT_SERVICE_VALUE = 10000
DEFAULT_BUDGET_MULTIPLIER = 0.8
DEFAULT_TIMELINE_MULTIPLIER = 1.0

# =============================================================================
# CONTACT KEYWORDS
# =============================================================================

URGENT_KEYWORDS = ("urgent", "asap", "emergency", "critical", "immediately")
HIGH_KEYWORDS = ("important", "priority", "soon", "quickly")


def _round_half_up(value: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


# =============================================================================
# CONSULTATION
# =============================================================================

def calculate_lead_score(
    budget: Optional[str],
    timeline: Optional[str],
    interested_services: Optional[Sequence[str]],
    business_size: Optional[str],
    industry: Optional[str] = None,
    *,
    budget_scores: Mapping[str, int] = BUDGET_SCORES,
    timeline_scores: Mapping[str, int] = TIMELINE_SCORES,
    size_scores: Mapping[str, int] = BUSINESS_SIZE_SCORES,
    high_value_industries: Iterable[str] = HIGH_VALUE_INDUSTRIES,
) -> int:
    """
    Score a consultation lead from 0 to 100.

    Starts at 50 and adds weighted budget (30%), timeline (20%) and
    business size (20%) table scores, 5 points per distinct interested service and a
    flat bonus for high-value industries. The total is rounded and clamped.
    """
    score = float(BASE_LEAD_SCORE)
    score += budget_scores.get(budget, DEFAULT_TABLE_SCORE) * 0.3
    score += timeline_scores.get(timeline, DEFAULT_TABLE_SCORE) * 0.2
    score += len(set(interested_services or [])) * SERVICE_INTEREST_POINTS
    score += size_scores.get(business_size, DEFAULT_TABLE_SCORE) * 0.2

    if industry and industry.strip().lower() in high_value_industries:
        score += INDUSTRY_BONUS

    return int(min(100, max(0, _round_half_up(score))))


def consultation_priority(lead_score: int, timeline: Optional[str]) -> str:
    """Priority tier for a consultation."""
    if lead_score >= 80 or timeline == Timeline.ASAP:
        return Priority.HIGH
    if lead_score >= 60 or timeline == Timeline.ONE_MONTH:
        return Priority.MEDIUM
    return Priority.LOW


def consultation_follow_up(created_at: datetime, priority: str) -> datetime:
    """High priority consultations are followed up after 3 days, others after 7."""
    days = 3 if priority == Priority.HIGH else 7
    return created_at + timedelta(days=days)


# =============================================================================
# SERVICE INQUIRY
# =============================================================================

def calculate_estimated_value(
    service_type: Optional[str],
    budget: Optional[str],
    timeline: Optional[str],
    additional_services: Optional[Sequence[str]] = None,
    *,
    base_values: Mapping[str, int] = SERVICE_BASE_VALUES,
    budget_multipliers: Mapping[str, float] = BUDGET_MULTIPLIERS,
    timeline_multipliers: Mapping[str, float] = TIMELINE_MULTIPLIERS,
    additional_values: Mapping[str, int] = ADDITIONAL_SERVICE_VALUES,
) -> float:
    """
    Estimate the deal value of a service inquiry.

    base(service_type) x budget multiplier x timeline multiplier, plus a flat
    amount per recognised add-on service. Rounded to 2 decimals.
    """
    value = float(base_values.get(service_type, DEFAULT_SERVICE_VALUE))
    value *= budget_multipliers.get(budget, DEFAULT_BUDGET_MULTIPLIER)
    value *= timeline_multipliers.get(timeline, DEFAULT_TIMELINE_MULTIPLIER)

    for service in additional_services or []:
        value += additional_values.get(service, 0)

    return float(_round_half_up(value, 2))


def inquiry_priority(estimated_value: float, timeline: Optional[str]) -> str:
    """Priority tier for a service inquiry."""
    if estimated_value >= 50000 or timeline == Timeline.ASAP:
        return Priority.HIGH
    if estimated_value >= 20000 or timeline == Timeline.ONE_MONTH:
        return Priority.MEDIUM
    return Priority.LOW


def inquiry_follow_up(created_at: datetime, priority: str) -> datetime:
    """Follow up after 1 day (high), 3 days (medium) or 7 days (low)."""
    days = {Priority.HIGH: 1, Priority.MEDIUM: 3}.get(priority, 7)
    return created_at + timedelta(days=days)


# =============================================================================
# CONTACT
# =============================================================================

def contact_priority(
    message: Optional[str],
    subject: Optional[str],
    *,
    urgent_keywords: Sequence[str] = URGENT_KEYWORDS,
    high_keywords: Sequence[str] = HIGH_KEYWORDS,
) -> str:
    """
    Classify a contact message by urgency keywords.

    Plain substring match on the lower-cased message and subject; any urgent
    keyword wins over the high-priority ones.
    """
    if not message:
        return Priority.MEDIUM

    text = f"{message} {subject or ''}".lower()

    if any(keyword in text for keyword in urgent_keywords):
        return Priority.URGENT
    if any(keyword in text for keyword in high_keywords):
        return Priority.HIGH
    return Priority.MEDIUM
