from sqlalchemy.orm import Session

from realestate.core.config import settings
from realestate.core.security import verify_password
from realestate.repositories.user import get_user_by_id


# ============================================================================
# GET USER TESTS
# ============================================================================


def test_get_user_by_id(client, owner_user: dict):
    response = client.get(f"/api/user/{owner_user['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == owner_user["email"]
    assert "passwordHash" not in data
    assert "password_hash" not in data


def test_get_user_not_found(client, db: Session):
    response = client.get("/api/user/424242")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_get_user_non_numeric_id(client, db: Session):
    """Test a non-numeric id does not match the user route."""
    response = client.get("/api/user/abc")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_get_user_out_of_range_id(client, db: Session):
    response = client.get("/api/user/99999999999999999999")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid value for user_id"}


def test_get_on_update_path_not_allowed(client, db: Session):
    response = client.get("/api/user/update")
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


# ============================================================================
# OWNER LOOKUP TESTS
# ============================================================================


def test_get_owner_id_returns_latest_owner(client, owner_user: dict, tenant_user: dict):
    response = client.get("/api/user/get-owner-id")
    assert response.status_code == 200
    assert response.json()["id"] == str(owner_user["id"])


def test_get_owner_id_without_owners(client, tenant_user: dict):
    response = client.get("/api/user/get-owner-id")
    assert response.status_code == 404
    assert response.json() == {"error": "No owner found"}


def test_get_owner_id_disabled(client, owner_user: dict, monkeypatch):
    monkeypatch.setattr(settings, "demo_owner_lookup", False)
    response = client.get("/api/user/get-owner-id")
    assert response.status_code == 404


# ============================================================================
# UPDATE USER TESTS
# ============================================================================


def test_update_user_only_changes_provided_fields(client, db: Session, owner_user: dict):
    response = client.put(
        "/api/user/update",
        json={"userId": str(owner_user["id"]), "firstName": "ريم"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "User updated successfully"
    assert data["user"]["firstName"] == "ريم"
    assert data["user"]["phone"] == owner_user["phone"]
    assert data["user"]["nationalId"] == owner_user["national_id"]


def test_update_user_requires_user_id(client, db: Session):
    response = client.put("/api/user/update", json={"firstName": "ريم"})
    assert response.status_code == 400
    assert response.json() == {"error": "userId is required"}


def test_update_user_email_in_use(client, owner_user: dict, tenant_user: dict):
    response = client.put(
        "/api/user/update",
        json={"userId": str(owner_user["id"]), "email": tenant_user["email"]},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Email already in use"}


def test_update_user_keeps_own_email(client, owner_user: dict):
    """Test re-sending the user's own email is not a conflict."""
    response = client.put(
        "/api/user/update",
        json={"userId": str(owner_user["id"]), "email": owner_user["email"]},
    )
    assert response.status_code == 200


def test_change_password_requires_current(client, owner_user: dict):
    response = client.put(
        "/api/user/update",
        json={"userId": str(owner_user["id"]), "newPassword": "another1"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Current password is required to change password"}


def test_change_password_wrong_current(client, owner_user: dict):
    response = client.put(
        "/api/user/update",
        json={
            "userId": str(owner_user["id"]),
            "newPassword": "another1",
            "currentPassword": "wrong-password",
        },
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Current password is incorrect"}


def test_change_password_too_short(client, owner_user: dict):
    response = client.put(
        "/api/user/update",
        json={
            "userId": str(owner_user["id"]),
            "newPassword": "abc",
            "currentPassword": owner_user["password"],
        },
    )
    assert response.status_code == 400
    assert response.json() == {"error": "New password must be at least 6 characters"}


def test_change_password_success(client, db: Session, owner_user: dict):
    response = client.put(
        "/api/user/update",
        json={
            "userId": str(owner_user["id"]),
            "newPassword": "another1",
            "currentPassword": owner_user["password"],
        },
    )
    assert response.status_code == 200

    user = get_user_by_id(db, owner_user["id"])
    db.refresh(user)
    assert verify_password("another1", user.password_hash)
