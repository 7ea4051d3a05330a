"""
Unit tests for input sanitization and per-kind validators.
"""
import pytest

from leadcapture.services.validation_service import (
    is_valid_phone,
    is_valid_url,
    sanitize_list,
    sanitize_text,
    validate_consultation,
    validate_contact,
    validate_service_inquiry,
)


def _consultation(**overrides):
    data = {
        "name": "John Smith",
        "email": "john@acme.com",
        "phone": "+1 (555) 987-6543",
        "company": "Acme Corp",
        "business_size": "51-200",
        "current_challenges": "Too many manual follow-ups.",
        "interested_services": ["ai_websites"],
        "budget": "15k_50k",
        "timeline": "3_months",
    }
    data.update(overrides)
    return data


def _contact(**overrides):
    data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "subject": "Hello there",
        "message": "I would like to know more.",
    }
    data.update(overrides)
    return data


class TestSanitize:

    def test_strips_tags_and_whitespace(self):
        assert sanitize_text("  <b>Hello</b> <script>x</script> ") == "Hello x"

    def test_empty_becomes_none(self):
        assert sanitize_text("   ") is None
        assert sanitize_text("<br>") is None
        assert sanitize_text(None) is None

    def test_list_drops_empty_members(self):
        assert sanitize_list([" seo ", "", "<i></i>", "hosting"]) == ["seo", "hosting"]
        assert sanitize_list(None) == []


class TestContactValidation:

    def test_valid(self):
        assert validate_contact(_contact()) == []

    @pytest.mark.parametrize("name,valid", [
        ("Jo", True),
        ("x" * 100, True),
        ("J", False),
        ("x" * 101, False),
        (None, False),
    ])
    def test_name_bounds(self, name, valid):
        errors = validate_contact(_contact(name=name))
        assert ("Name must be between 2 and 100 characters" not in errors) is valid

    def test_errors_are_ordered(self):
        errors = validate_contact({"email": "nope", "phone": "abc"})
        assert errors == [
            "Name must be between 2 and 100 characters",
            "Please provide a valid email address",
            "Please provide a valid phone number",
            "Subject must be between 5 and 200 characters",
            "Message must be between 10 and 2000 characters",
        ]

    def test_phone_is_optional(self):
        assert validate_contact(_contact(phone=None)) == []

    def test_does_not_mutate_input(self):
        data = _contact(name="J")
        snapshot = dict(data)
        validate_contact(data)
        assert data == snapshot


class TestConsultationValidation:

    def test_valid(self):
        assert validate_consultation(_consultation()) == []

    def test_no_services(self):
        errors = validate_consultation(_consultation(interested_services=[]))
        assert errors == ["Please select at least one service"]

    def test_unknown_service_listed(self):
        errors = validate_consultation(
            _consultation(interested_services=["ai_websites", "time_travel"])
        )
        assert errors == ["Invalid service selection: time_travel"]

    def test_phone_required(self):
        errors = validate_consultation(_consultation(phone=None))
        assert "Please provide a valid phone number" in errors

    def test_enums(self):
        errors = validate_consultation(
            _consultation(business_size="huge", budget="lots", timeline="whenever")
        )
        assert errors == [
            "Please select a valid business size",
            "Please select a valid budget range",
            "Please select a valid timeline",
        ]


class TestServiceInquiryValidation:

    def _inquiry(self, **overrides):
        data = {
            "name": "Maria Lopez",
            "email": "maria@shop.io",
            "service_type": "ai_website",
            "project_description": "A brand new storefront with search.",
            "budget": "5k_15k",
            "timeline": "1_month",
        }
        data.update(overrides)
        return data

    def test_valid(self):
        assert validate_service_inquiry(self._inquiry()) == []

    def test_short_description(self):
        errors = validate_service_inquiry(self._inquiry(project_description="Too short"))
        assert errors == ["Project description must be between 20 and 2000 characters"]

    def test_bad_website(self):
        errors = validate_service_inquiry(self._inquiry(current_website="shop.io"))
        assert errors == ["Please provide a valid website URL"]

    def test_unknown_service_type(self):
        errors = validate_service_inquiry(self._inquiry(service_type="ai_websites"))
        assert errors == ["Please select a valid service type"]


@pytest.mark.parametrize("phone,valid", [
    ("+1 555 123 4567", True),
    ("(555) 123-4567", True),
    ("123456", False),
    ("555-CALL-NOW", False),
])
def test_phone_format(phone, valid):
    assert is_valid_phone(phone) is valid


@pytest.mark.parametrize("url,valid", [
    ("https://example.com", True),
    ("http://example.com/path?q=1", True),
    ("ftp://example.com", False),
    ("https://", False),
    ("example.com", False),
])
def test_url_format(url, valid):
    assert is_valid_url(url) is valid
