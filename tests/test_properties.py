from sqlalchemy.orm import Session

from realestate.db.models.contract import Contract as ContractModel
from realestate.db.models.payment import Payment as PaymentModel
from realestate.db.models.unit import Unit as UnitModel
from realestate.domain.statuses import PAYMENT_DUE, PROPERTY_AVAILABLE


def _property_payload(owner_id, **overrides) -> dict:
    payload = {
        "ownerId": str(owner_id),
        "name": "عمارة الورود",
        "type": "عمارة",
        "address": "طريق الأمير سلطان",
        "city": "جدة",
    }
    payload.update(overrides)
    return payload


# ============================================================================
# CREATE PROPERTY TESTS
# ============================================================================


def test_create_property_defaults(client, owner_user: dict):
    """Test new properties are available and default to the configured country."""
    response = client.post("/api/properties", json=_property_payload(owner_user["id"]))
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == PROPERTY_AVAILABLE
    assert data["country"] == "المملكة العربية السعودية"
    assert data["publicDisplay"] is False
    assert data["owner"]["email"] == owner_user["email"]
    assert "passwordHash" not in data["owner"]


def test_create_property_accepts_numeric_rooms(client, owner_user: dict):
    response = client.post(
        "/api/properties",
        json=_property_payload(owner_user["id"], rooms=3, bathrooms=2, constructionYear=2019),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["rooms"] == "3"
    assert data["bathrooms"] == "2"
    assert data["constructionYear"] == "2019"


def test_create_property_json_fields(client, owner_user: dict):
    """Test list/object fields come back decoded."""
    response = client.post(
        "/api/properties",
        json=_property_payload(
            owner_user["id"],
            features={"parking": True, "pool": False},
            images=["https://cdn.example.com/1.jpg"],
        ),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["features"] == {"parking": True, "pool": False}
    assert data["images"] == ["https://cdn.example.com/1.jpg"]


def test_create_property_string_json_fields_keep_type(client, owner_user: dict):
    """Test string values in JSON columns are not re-parsed into numbers or booleans."""
    response = client.post(
        "/api/properties",
        json=_property_payload(owner_user["id"], images="2024", features="true"),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["images"] == "2024"
    assert data["features"] == "true"

    detail = client.get(f"/api/properties/{data['id']}").json()
    assert detail["images"] == "2024"
    assert detail["features"] == "true"


def test_create_property_missing_fields(client, owner_user: dict):
    payload = _property_payload(owner_user["id"])
    del payload["city"]
    response = client.post("/api/properties", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_create_property_blank_required_field(client, owner_user: dict):
    response = client.post(
        "/api/properties", json=_property_payload(owner_user["id"], name="   ")
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_create_property_unknown_owner(client, db: Session):
    response = client.post("/api/properties", json=_property_payload(777))
    assert response.status_code == 404
    assert response.json() == {"error": "Owner not found"}


# ============================================================================
# LIST / GET PROPERTY TESTS
# ============================================================================


def test_list_properties_requires_owner(client, db: Session):
    response = client.get("/api/properties")
    assert response.status_code == 400
    assert response.json() == {"error": "ownerId is required"}


def test_list_properties_newest_first(client, owner_user: dict):
    first = client.post("/api/properties", json=_property_payload(owner_user["id"], name="أ"))
    second = client.post("/api/properties", json=_property_payload(owner_user["id"], name="ب"))

    response = client.get("/api/properties", params={"ownerId": str(owner_user["id"])})
    assert response.status_code == 200
    ids = [p["id"] for p in response.json()]
    assert ids == [second.json()["id"], first.json()["id"]]


def test_list_properties_only_for_owner(client, owner_user: dict, tenant_user: dict, property_record):
    response = client.get("/api/properties", params={"ownerId": str(tenant_user["id"])})
    assert response.status_code == 200
    assert response.json() == []


def test_get_property_detail(client, property_record, unit_record, contract_record):
    response = client.get(f"/api/properties/{property_record.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "برج النخيل"
    assert [u["unitNumber"] for u in data["units"]] == ["A1"]
    assert [c["id"] for c in data["contracts"]] == [contract_record.id]
    assert data["contracts"][0]["payments"] == []
    assert data["maintenanceRequests"] == []


def test_get_property_not_found(client, db: Session):
    response = client.get("/api/properties/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Property not found"}


# ============================================================================
# UPDATE PROPERTY TESTS
# ============================================================================


def test_update_property_only_changes_provided_fields(client, property_record):
    response = client.put(
        f"/api/properties/{property_record.id}", json={"name": "برج الواحة"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "برج الواحة"
    assert data["address"] == "شارع الملك فهد"
    assert data["city"] == "الرياض"
    assert data["neighborhood"] == "العليا"
    assert data["rooms"] == "4"
    assert data["status"] == PROPERTY_AVAILABLE


def test_update_property_ignores_nulls(client, property_record):
    response = client.put(
        f"/api/properties/{property_record.id}", json={"city": None, "area": 250}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["city"] == "الرياض"
    assert data["area"] == 250


def test_update_property_not_found(client, db: Session):
    response = client.put("/api/properties/does-not-exist", json={"name": "x"})
    assert response.status_code == 404


# ============================================================================
# DELETE PROPERTY TESTS
# ============================================================================


def test_delete_property_cascades(client, db: Session, owner_user: dict, property_record, contract_record):
    from datetime import datetime

    db.add(
        PaymentModel(
            contract_id=contract_record.id,
            owner_id=owner_user["id"],
            type="إيجار",
            amount=3500,
            due_date=datetime(2025, 2, 1),
            status=PAYMENT_DUE,
        )
    )
    db.commit()
    property_id = property_record.id

    response = client.delete(f"/api/properties/{property_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Property deleted successfully"}

    assert client.get(f"/api/properties/{property_id}").status_code == 404
    assert db.query(UnitModel).filter(UnitModel.property_id == property_id).count() == 0
    assert db.query(ContractModel).filter(ContractModel.property_id == property_id).count() == 0
    assert db.query(PaymentModel).count() == 0


def test_delete_property_not_found(client, db: Session):
    response = client.delete("/api/properties/does-not-exist")
    assert response.status_code == 404


def test_method_not_allowed(client, db: Session):
    response = client.patch("/api/properties")
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
