"""
HTTP tests for the service inquiry endpoints.
"""
import uuid

import pytest


async def _submit(client, payload):
    response = await client.post("/api/services/inquiry", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.mark.asyncio
async def test_submit_inquiry_estimates_value(client, inquiry_payload, email_service):
    data = await _submit(client, inquiry_payload)

    assert data["estimated_value"] == 21000.0
    assert data["priority"] == "medium"
    assert data["status"] == "new"
    assert data["email_sent"] is True

    admin_email = email_service.get_last_email()
    assert admin_email["subject"] == "New Service Inquiry - CUSTOM AI SOLUTION (Est. Value: $21,000.00)"
    assert admin_email["reply_to"] == "maria@shop.io"


@pytest.mark.asyncio
async def test_invalid_inquiry(client, inquiry_payload):
    inquiry_payload.update({"service_type": "teleportation", "current_website": "not a url"})
    response = await client.post("/api/services/inquiry", json=inquiry_payload)

    assert response.status_code == 422
    assert response.json()["validation_errors"] == [
        "Please select a valid service type",
        "Please provide a valid website URL",
    ]


@pytest.mark.asyncio
async def test_get_inquiry(client, inquiry_payload):
    created = await _submit(client, inquiry_payload)

    data = (await client.get(f"/api/services/inquiry/{created['id']}")).json()["data"]
    assert data["additional_services"] == ["seo"]
    assert data["preferred_style"] == "not_sure"
    assert data["quote_sent"] is False
    assert data["notes"] == []


@pytest.mark.asyncio
async def test_get_missing_inquiry(client):
    response = await client.get(f"/api/services/inquiry/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"] == "Service inquiry not found"


@pytest.mark.asyncio
async def test_list_filters_by_service_type(client, inquiry_payload):
    await _submit(client, inquiry_payload)
    inquiry_payload["service_type"] = "ai_website"
    await _submit(client, inquiry_payload)

    response = await client.get("/api/services/inquiry", params={"service_type": "ai_website"})

    data = response.json()["data"]
    assert [i["service_type"] for i in data] == ["ai_website"]
    assert response.json()["meta"]["pagination"]["total"] == 1


@pytest.mark.asyncio
async def test_list_sorted_by_value(client, inquiry_payload):
    await _submit(client, inquiry_payload)
    inquiry_payload["service_type"] = "consultation"
    await _submit(client, inquiry_payload)

    response = await client.get("/api/services/inquiry", params={"sortBy": "estimated_value"})

    values = [i["estimated_value"] for i in response.json()["data"]]
    assert values == sorted(values, reverse=True)


@pytest.mark.asyncio
async def test_quote_marks_quote_sent_once(client, inquiry_payload):
    created = await _submit(client, inquiry_payload)
    url = f"/api/services/inquiry/{created['id']}/status"

    response = await client.put(url, json={
        "status": "quoted",
        "quote_amount": 19500,
        "assigned_to": "sam",
        "notes": "Sent PDF quote",
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "quoted"
    assert data["quote_amount"] == 19500
    assert data["quote_sent"] is True
    assert data["assigned_to"] == "sam"

    first = (await client.get(f"/api/services/inquiry/{created['id']}")).json()["data"]
    await client.put(url, json={"status": "quoted", "quote_amount": 18000})
    second = (await client.get(f"/api/services/inquiry/{created['id']}")).json()["data"]

    assert second["quote_amount"] == 18000
    assert second["quote_sent_at"] == first["quote_sent_at"]
    assert [n["content"] for n in second["notes"]] == ["Sent PDF quote"]


@pytest.mark.asyncio
async def test_quoted_without_amount_is_not_sent(client, inquiry_payload):
    created = await _submit(client, inquiry_payload)

    response = await client.put(
        f"/api/services/inquiry/{created['id']}/status", json={"status": "quoted"}
    )

    assert response.json()["data"]["quote_sent"] is False


@pytest.mark.asyncio
async def test_negative_quote_rejected(client, inquiry_payload):
    created = await _submit(client, inquiry_payload)

    response = await client.put(
        f"/api/services/inquiry/{created['id']}/status",
        json={"status": "quoted", "quote_amount": -1},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_stats(client, inquiry_payload):
    await _submit(client, inquiry_payload)
    inquiry_payload["service_type"] = "consultation"
    await _submit(client, inquiry_payload)

    summary = (await client.get("/api/services/stats/summary")).json()["data"]
    assert summary["total"] == 2
    assert summary["new"] == 2
    # 21000 + (2000 * 0.8 * 0.9 + 3000)
    assert summary["total_estimated_value"] == 25440.0

    by_service = (await client.get("/api/services/stats/by-service")).json()["data"]
    assert [row["service_type"] for row in by_service] == ["custom_ai_solution", "consultation"]


@pytest.mark.asyncio
async def test_service_types(client):
    response = await client.get("/api/services/types")

    data = response.json()["data"]
    assert [t["id"] for t in data] == [
        "ai_website",
        "smart_chatbot",
        "email_marketing",
        "social_media_automation",
        "custom_ai_solution",
        "consultation",
    ]
    assert data[0]["base_price"] == 15000
    assert data[0]["features"]
