"""
Validation service - input sanitization and per-kind field checks.

Validators take a dict of already sanitized values and return a list of
human-readable error messages. They never raise and never modify the input.
"""
import re
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from leadcapture.models.choices import (
    Budget, Timeline, BusinessSize, InterestedService, ServiceType
)

TAG_RE = re.compile(r"<[^>]*>")
EMAIL_RE = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)+$"
)
PHONE_RE = re.compile(r"^[+]?[0-9 \-()]{7,20}$")


# =============================================================================
# SANITIZATION
# =============================================================================

def sanitize_text(value: Any) -> Optional[str]:
    """Strip markup and surrounding whitespace. Empty results become None."""
    if value is None:
        return None
    text = TAG_RE.sub("", str(value)).strip()
    return text or None


def sanitize_email(value: Any) -> Optional[str]:
    """Drop whitespace and anything that cannot appear in an address."""
    if value is None:
        return None
    text = re.sub(r"[^A-Za-z0-9!#$%&'*+/=?^_`{|}~@.\[\]-]", "", str(value))
    return text or None


def sanitize_list(values: Any) -> List[str]:
    """Sanitize every member of a list, dropping empty members."""
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    cleaned = [sanitize_text(v) for v in values]
    return [v for v in cleaned if v]


# =============================================================================
# FIELD CHECKS
# =============================================================================

def _length_between(value: Optional[str], minimum: int, maximum: int) -> bool:
    return value is not None and minimum <= len(value) <= maximum


def is_valid_email(value: Optional[str]) -> bool:
    return bool(value) and len(value) <= 254 and EMAIL_RE.match(value) is not None


def is_valid_phone(value: Optional[str]) -> bool:
    return bool(value) and PHONE_RE.match(value) is not None


def is_valid_url(value: Optional[str]) -> bool:
    if not value or any(c.isspace() for c in value):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _check_name_and_email(data: Dict[str, Any], errors: List[str]) -> None:
    if not _length_between(data.get("name"), 2, 100):
        errors.append("Name must be between 2 and 100 characters")

    if not is_valid_email(data.get("email")):
        errors.append("Please provide a valid email address")


def _check_budget_and_timeline(data: Dict[str, Any], errors: List[str]) -> None:
    if data.get("budget") not in Budget.ALL:
        errors.append("Please select a valid budget range")

    if data.get("timeline") not in Timeline.ALL:
        errors.append("Please select a valid timeline")


# =============================================================================
# VALIDATORS
# =============================================================================

def validate_contact(data: Dict[str, Any]) -> List[str]:
    """Validate a contact form submission."""
    errors: List[str] = []

    _check_name_and_email(data, errors)

    phone = data.get("phone")
    if phone and not is_valid_phone(phone):
        errors.append("Please provide a valid phone number")

    if not _length_between(data.get("subject"), 5, 200):
        errors.append("Subject must be between 5 and 200 characters")

    if not _length_between(data.get("message"), 10, 2000):
        errors.append("Message must be between 10 and 2000 characters")

    return errors


def validate_consultation(data: Dict[str, Any]) -> List[str]:
    """Validate a consultation booking. Phone and company are mandatory here."""
    errors: List[str] = []

    _check_name_and_email(data, errors)

    if not is_valid_phone(data.get("phone")):
        errors.append("Please provide a valid phone number")

    if not _length_between(data.get("company"), 2, 100):
        errors.append("Company name must be between 2 and 100 characters")

    if data.get("business_size") not in BusinessSize.ALL:
        errors.append("Please select a valid business size")

    if not _length_between(data.get("current_challenges"), 10, 1000):
        errors.append("Current challenges must be between 10 and 1000 characters")

    services = data.get("interested_services") or []
    if not services:
        errors.append("Please select at least one service")
    else:
        for service in services:
            if service not in InterestedService.ALL:
                errors.append(f"Invalid service selection: {service}")

    _check_budget_and_timeline(data, errors)

    return errors


def validate_service_inquiry(data: Dict[str, Any]) -> List[str]:
    """Validate a service inquiry."""
    errors: List[str] = []

    _check_name_and_email(data, errors)

    phone = data.get("phone")
    if phone and not is_valid_phone(phone):
        errors.append("Please provide a valid phone number")

    if data.get("service_type") not in ServiceType.ALL:
        errors.append("Please select a valid service type")

    if not _length_between(data.get("project_description"), 20, 2000):
        errors.append("Project description must be between 20 and 2000 characters")

    _check_budget_and_timeline(data, errors)

    website = data.get("current_website")
    if website and not is_valid_url(website):
        errors.append("Please provide a valid website URL")

    return errors
