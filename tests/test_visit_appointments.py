from sqlalchemy.orm import Session


def _appointment_payload(owner_id, property_id, **overrides) -> dict:
    payload = {
        "propertyId": property_id,
        "ownerId": str(owner_id),
        "requesterName": "فهد",
        "requesterPhone": "0555555555",
        "visitType": "حضوري",
        "scheduledDate": "2025-07-02T00:00:00",
        "timeSlot": "10:00-11:00",
    }
    payload.update(overrides)
    return payload


def test_book_appointment(client, owner_user: dict, property_record):
    response = client.post(
        "/api/property-visit-appointments",
        json=_appointment_payload(owner_user["id"], property_record.id),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["requesterName"] == "فهد"
    assert data["ownerId"] == str(owner_user["id"])
    assert data["property"]["id"] == property_record.id


def test_book_appointment_unknown_property(client, owner_user: dict):
    response = client.post(
        "/api/property-visit-appointments",
        json=_appointment_payload(owner_user["id"], "missing"),
    )
    assert response.status_code == 404


def test_book_appointment_missing_fields(client, owner_user: dict, property_record):
    payload = _appointment_payload(owner_user["id"], property_record.id)
    del payload["timeSlot"]
    response = client.post("/api/property-visit-appointments", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_list_appointments_soonest_first(client, owner_user: dict, property_record):
    for day in ("2025-07-05T00:00:00", "2025-07-01T00:00:00"):
        client.post(
            "/api/property-visit-appointments",
            json=_appointment_payload(owner_user["id"], property_record.id, scheduledDate=day),
        )

    response = client.get(
        "/api/property-visit-appointments", params={"propertyId": property_record.id}
    )
    assert response.status_code == 200
    dates = [a["scheduledDate"][:10] for a in response.json()]
    assert dates == ["2025-07-01", "2025-07-05"]


def test_list_appointments_without_filters(client, db: Session):
    response = client.get("/api/property-visit-appointments")
    assert response.status_code == 200
    assert response.json() == []
