"""
HTTP tests for the consultation endpoints.
"""
import uuid
from datetime import datetime, timedelta

import pytest


async def _book(client, payload):
    response = await client.post("/api/consultation", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.mark.asyncio
async def test_book_consultation_scores_lead(client, consultation_payload):
    response = await client.post("/api/consultation", json=consultation_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Free consultation booked successfully"

    data = body["data"]
    assert data["lead_score"] == 100
    assert data["priority"] == "high"
    assert data["status"] == "pending"

    booked_at = datetime.fromisoformat(data["booked_at"])
    follow_up = datetime.fromisoformat(data["follow_up_date"])
    assert follow_up - booked_at == timedelta(days=3)


@pytest.mark.asyncio
async def test_book_consultation_low_priority(client, consultation_payload):
    consultation_payload.update({
        "budget": "under_5k",
        "timeline": "1_year",
        "business_size": "1-10",
        "industry": None,
        "interested_services": ["consultation_only"],
    })
    data = await _book(client, consultation_payload)

    # 50 + 6 + 4 + 5 + 6
    assert data["lead_score"] == 71
    assert data["priority"] == "medium"


@pytest.mark.asyncio
async def test_repeated_service_scores_once(client, consultation_payload):
    consultation_payload.update({
        "budget": "under_5k",
        "timeline": "1_year",
        "business_size": "1-10",
        "industry": None,
        "interested_services": ["email_marketing"] * 6,
    })
    data = await _book(client, consultation_payload)

    assert data["lead_score"] == 71
    assert data["priority"] == "medium"

    stored = (await client.get(f"/api/consultation/{data['id']}")).json()["data"]
    assert stored["interested_services"] == ["email_marketing"]


@pytest.mark.asyncio
async def test_no_services_selected(client, consultation_payload, email_service):
    consultation_payload["interested_services"] = []
    response = await client.post("/api/consultation", json=consultation_payload)

    assert response.status_code == 422
    assert response.json()["validation_errors"] == ["Please select at least one service"]
    assert email_service.sent_emails == []


@pytest.mark.asyncio
async def test_wrong_type_is_input_error(client, consultation_payload):
    consultation_payload["interested_services"] = {"not": "a list"}
    response = await client.post("/api/consultation", json=consultation_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid JSON data"


@pytest.mark.asyncio
async def test_get_consultation(client, consultation_payload):
    created = await _book(client, consultation_payload)

    response = await client.get(f"/api/consultation/{created['id']}")

    data = response.json()["data"]
    assert data["interested_services"] == ["smart_chatbots", "email_marketing"]
    assert data["preferred_contact_method"] == "email"
    assert data["preferred_time"] == "flexible"
    assert data["follow_up_required"] is True


@pytest.mark.asyncio
async def test_get_missing_consultation(client):
    response = await client.get(f"/api/consultation/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"] == "Consultation not found"


@pytest.mark.asyncio
async def test_malformed_id(client):
    response = await client.get("/api/consultation/not-a-uuid")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_sorted_by_score(client, consultation_payload):
    await _book(client, consultation_payload)
    consultation_payload.update({"budget": "under_5k", "timeline": "1_year", "industry": None})
    await _book(client, consultation_payload)

    response = await client.get("/api/consultation", params={"sortBy": "lead_score", "sortOrder": "ASC"})

    scores = [c["lead_score"] for c in response.json()["data"]]
    assert scores == sorted(scores)
    assert response.json()["meta"]["pagination"]["total"] == 2


@pytest.mark.asyncio
async def test_list_filters_by_priority(client, consultation_payload):
    await _book(client, consultation_payload)

    high = await client.get("/api/consultation", params={"priority": "high"})
    low = await client.get("/api/consultation", params={"priority": "low"})

    assert len(high.json()["data"]) == 1
    assert low.json()["data"] == []


@pytest.mark.asyncio
async def test_update_status(client, consultation_payload):
    created = await _book(client, consultation_payload)
    url = f"/api/consultation/{created['id']}/status"

    response = await client.put(url, json={
        "status": "scheduled",
        "scheduled_date": "2030-05-01T15:00:00Z",
        "consultation_notes": "Demo the chatbot",
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "scheduled"
    assert data["scheduled_date"].startswith("2030-05-01T15:00:00")
    assert data["consultation_notes"] == "Demo the chatbot"

    # Omitted fields keep their values
    response = await client.put(url, json={"status": "completed"})
    data = response.json()["data"]
    assert data["status"] == "completed"
    assert data["consultation_notes"] == "Demo the chatbot"
    assert data["scheduled_date"].startswith("2030-05-01T15:00:00")


@pytest.mark.asyncio
async def test_scheduled_date_is_normalised_to_utc(client, consultation_payload):
    created = await _book(client, consultation_payload)

    response = await client.put(f"/api/consultation/{created['id']}/status", json={
        "status": "scheduled",
        "scheduled_date": "2030-05-01T17:00:00+02:00",
    })

    assert response.status_code == 200
    assert response.json()["data"]["scheduled_date"].startswith("2030-05-01T15:00:00")


@pytest.mark.asyncio
async def test_update_status_invalid(client, consultation_payload):
    created = await _book(client, consultation_payload)

    response = await client.put(f"/api/consultation/{created['id']}/status", json={"status": "rescheduled"})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid status. Must be one of: pending, scheduled")


@pytest.mark.asyncio
async def test_stats(client, consultation_payload):
    await _book(client, consultation_payload)
    consultation_payload.update({
        "budget": "under_5k",
        "timeline": "1_year",
        "industry": None,
        "business_size": "1-10",
        "interested_services": ["consultation_only"],
    })
    await _book(client, consultation_payload)

    summary = (await client.get("/api/consultation/stats/summary")).json()["data"]
    assert summary["total"] == 2
    assert summary["pending"] == 2
    assert summary["high_priority"] == 1

    leads = (await client.get("/api/consultation/stats/leads")).json()["data"]
    assert leads == [
        {"lead_category": "hot", "count": 1, "average_score": 100.0},
        {"lead_category": "warm", "count": 1, "average_score": 71.0},
    ]
