from sqlalchemy.orm import Session

from realestate.domain.statuses import ACTIVE
from realestate.repositories.tenant import create_tenant


def _contract_payload(owner_id, property_id, **overrides) -> dict:
    payload = {
        "propertyId": property_id,
        "ownerId": str(owner_id),
        "tenantName": "محمد الدوسري",
        "tenantPhone": "0533333333",
        "type": "سكني",
        "startDate": "2025-03-01T00:00:00",
        "endDate": "2026-02-28T00:00:00",
        "monthlyRent": 4200,
    }
    payload.update(overrides)
    return payload


def test_create_contract_with_inline_tenant(client, owner_user: dict, property_record, unit_record):
    response = client.post(
        "/api/contracts",
        json=_contract_payload(owner_user["id"], property_record.id, unitId=unit_record.id),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == ACTIVE
    assert data["tenantName"] == "محمد الدوسري"
    assert data["ownerId"] == str(owner_user["id"])
    assert data["property"]["name"] == "برج النخيل"
    assert data["unit"]["unitNumber"] == "A1"
    assert data["payments"] == []


def test_create_contract_requires_tenant(client, owner_user: dict, property_record):
    payload = _contract_payload(owner_user["id"], property_record.id)
    del payload["tenantName"]
    response = client.post("/api/contracts", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "tenantId or tenantName is required"}


def test_create_contract_from_registered_tenant(client, db: Session, owner_user: dict, property_record):
    tenant = create_tenant(
        db,
        first_name="هند",
        last_name="المطيري",
        phone_number="0544444444",
        email="hind@example.com",
        status=ACTIVE,
    )
    payload = _contract_payload(owner_user["id"], property_record.id, tenantId=tenant.id)
    del payload["tenantName"]
    del payload["tenantPhone"]

    response = client.post("/api/contracts", json=payload)
    assert response.status_code == 201
    data = response.json()
    assert data["tenantId"] == tenant.id
    assert data["tenantName"] == "هند المطيري"
    assert data["tenantEmail"] == "hind@example.com"
    assert data["tenantPhone"] == "0544444444"


def test_create_contract_unknown_tenant(client, owner_user: dict, property_record):
    response = client.post(
        "/api/contracts",
        json=_contract_payload(owner_user["id"], property_record.id, tenantId="missing"),
    )
    assert response.status_code == 404


def test_create_contract_unknown_property(client, owner_user: dict):
    response = client.post("/api/contracts", json=_contract_payload(owner_user["id"], "missing"))
    assert response.status_code == 404
    assert response.json() == {"error": "Property with id missing not found"}


def test_create_contract_end_before_start(client, owner_user: dict, property_record):
    response = client.post(
        "/api/contracts",
        json=_contract_payload(
            owner_user["id"],
            property_record.id,
            startDate="2025-03-01T00:00:00",
            endDate="2025-01-01T00:00:00",
        ),
    )
    assert response.status_code == 400
    assert "cannot precede" in response.json()["error"]


def test_create_contract_non_positive_rent(client, owner_user: dict, property_record):
    response = client.post(
        "/api/contracts",
        json=_contract_payload(owner_user["id"], property_record.id, monthlyRent=0),
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid value for monthlyRent"}


def test_list_contracts(client, owner_user: dict, contract_record):
    response = client.get("/api/contracts", params={"ownerId": str(owner_user["id"])})
    assert response.status_code == 200
    data = response.json()
    assert [c["id"] for c in data] == [contract_record.id]
    assert data[0]["property"]["city"] == "الرياض"


def test_list_contracts_status_filter(client, owner_user: dict, contract_record):
    response = client.get(
        "/api/contracts", params={"ownerId": str(owner_user["id"]), "status": "منتهي"}
    )
    assert response.status_code == 200
    assert response.json() == []


def test_list_contracts_requires_owner(client, db: Session):
    response = client.get("/api/contracts")
    assert response.status_code == 400
    assert response.json() == {"error": "ownerId is required"}


def test_create_contract_mixed_timezone_dates(client, owner_user: dict, property_record):
    """Test an offset-aware start and a plain end date are compared in UTC."""
    response = client.post(
        "/api/contracts",
        json=_contract_payload(
            owner_user["id"],
            property_record.id,
            startDate="2025-01-01T00:00:00Z",
            endDate="2025-12-31",
        ),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["startDate"].startswith("2025-01-01T00:00:00")
    assert data["endDate"].startswith("2025-12-31T00:00:00")


def test_create_contract_offset_dates_stored_as_utc(client, owner_user: dict, property_record):
    response = client.post(
        "/api/contracts",
        json=_contract_payload(
            owner_user["id"],
            property_record.id,
            startDate="2025-03-01T02:00:00+03:00",
            endDate="2025-03-01",
        ),
    )
    assert response.status_code == 201
    assert response.json()["startDate"].startswith("2025-02-28T23:00:00")


def test_create_contract_mixed_timezone_end_before_start(client, owner_user: dict, property_record):
    response = client.post(
        "/api/contracts",
        json=_contract_payload(
            owner_user["id"],
            property_record.id,
            startDate="2025-06-01T00:00:00Z",
            endDate="2025-01-01",
        ),
    )
    assert response.status_code == 400
    assert "cannot precede" in response.json()["error"]
