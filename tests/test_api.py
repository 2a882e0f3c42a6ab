"""API integration tests: wire shapes, error responses, admin gate."""

from rsvp_server.config import settings


def _create(client, name="Aisha", **extra):
    r = client.post("/api/guests", json={"name": name, **extra})
    assert r.status_code == 200, r.text
    return r.json()


# --- Health ---

def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
    assert client.get("/").json()["status"] == "running"


# --- Guests ---

def test_create_guest_shape(client):
    data = _create(client, phone="0770", group="Family")
    assert data["success"] is True
    assert data["guestNumber"] == "1001"
    guest = data["guest"]
    assert guest["guestNumber"] == "1001"
    assert guest["status"] == "pending"
    assert guest["attendance"] is None
    assert guest["group"] == "Family"
    assert guest["phone"] == "0770"


def test_create_guest_without_name(client):
    r = client.post("/api/guests", json={"phone": "0770"})
    assert r.status_code == 400
    assert r.json() == {"error": "Name is required"}


def test_get_guest(client):
    _create(client)
    r = client.get("/api/guests/1001")
    assert r.status_code == 200
    assert r.json()["name"] == "Aisha"

    r = client.get("/api/guests/9999")
    assert r.status_code == 404
    assert r.json() == {"error": "Guest not found"}


def test_list_guests_and_filter(client):
    _create(client, "A")
    _create(client, "B")
    client.post("/api/rsvp", json={"guestNumber": "1001", "attending": False})

    all_guests = client.get("/api/guests").json()
    assert [g["guestNumber"] for g in all_guests] == ["1002", "1001"]

    declined = client.get("/api/guests", params={"status": "declined"}).json()
    assert [g["guestNumber"] for g in declined] == ["1001"]

    r = client.get("/api/guests", params={"status": "maybe"})
    assert r.status_code == 400


def test_bulk_create(client):
    r = client.post("/api/guests/bulk", json={"text": "Ali\n\n  Sara  \nOmar\n"})
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert [g["name"] for g in data["created"]] == ["Ali", "Sara", "Omar"]
    assert [g["guestNumber"] for g in data["created"]] == ["1001", "1002", "1003"]
    assert data["failed"] == []

    r = client.post("/api/guests/bulk", json={"text": "\n  \n"})
    assert r.status_code == 400


def test_delete_guest(client):
    _create(client)
    client.post("/api/device/register", json={"guestNumber": "1001", "fingerprint": "fp-1"})

    r = client.delete("/api/guests/1001")
    assert r.status_code == 200
    assert r.json() == {"success": True, "guestNumber": "1001", "deletedGuest": "Aisha"}
    assert client.get("/api/device/register", params={"guestNumber": "1001"}).json()["deviceCount"] == 0

    assert client.delete("/api/guests/1001").status_code == 404


def test_invitation_link(client):
    _create(client)
    _create(client, "Sara", phone="+964 770 123")

    data = client.get("/api/guests/1001/invitation").json()
    assert data["guestNumber"] == "1001"
    assert data["link"] == f"{settings.app_url.rstrip('/')}/1001"
    assert "Aisha" in data["message"]
    assert data["link"] in data["message"]
    assert data["whatsappUrl"] is None

    data = client.get("/api/guests/1002/invitation").json()
    assert data["whatsappUrl"].startswith("https://wa.me/964770123?text=")

    assert client.get("/api/guests/9999/invitation").status_code == 404


# --- RSVP ---

def test_submit_rsvp_scenario(client):
    _create(client)
    r = client.post("/api/rsvp", json={
        "guestNumber": "1001",
        "name": "Aisha",
        "attending": True,
        "guestsCount": 4,
        "message": "❤️",
    })
    assert r.status_code == 200
    assert r.json()["success"] is True

    guest = client.get("/api/guests/1001").json()
    assert guest["status"] == "confirmed"
    assert guest["attendance"]["attending"] is True
    assert guest["attendance"]["guestsCount"] == 4
    assert guest["attendance"]["message"] == "❤️"
    assert guest["attendance"]["submittedAt"]


def test_submit_rsvp_defaults_count_to_one(client):
    _create(client)
    client.post("/api/rsvp", json={"guestNumber": "1001", "attending": True})
    assert client.get("/api/guests/1001").json()["attendance"]["guestsCount"] == 1


def test_submit_rsvp_errors(client):
    _create(client)
    r = client.post("/api/rsvp", json={"attending": True, "guestsCount": 1})
    assert r.status_code == 400
    assert r.json() == {"error": "Guest number is required"}

    r = client.post("/api/rsvp", json={"guestNumber": "9999", "attending": True})
    assert r.status_code == 404

    r = client.post("/api/rsvp", json={"guestNumber": "1001", "attending": "yes"})
    assert r.status_code == 400
    assert client.get("/api/guests/1001").json()["status"] == "pending"


def test_update_rsvp_by_path(client):
    _create(client)
    client.put("/api/guests/1001", json={"attending": True, "guestsCount": 2})
    r = client.put("/api/guests/1001", json={"attending": False, "guestsCount": 2})
    assert r.status_code == 200

    guest = client.get("/api/guests/1001").json()
    assert guest["status"] == "declined"
    assert guest["attendance"]["guestsCount"] == 0

    assert client.put("/api/guests/9999", json={"attending": False}).status_code == 404


def test_stats(client):
    for name in ("A", "B", "C", "D", "E"):
        _create(client, name)
    client.post("/api/rsvp", json={"guestNumber": "1001", "attending": True, "guestsCount": 3})
    client.post("/api/rsvp", json={"guestNumber": "1002", "attending": True, "guestsCount": 1})
    client.post("/api/rsvp", json={"guestNumber": "1003", "attending": False})

    expected = {"total": 5, "confirmed": 2, "declined": 1, "pending": 2, "totalGuests": 4}
    assert client.get("/api/stats").json() == expected
    assert client.get("/api/rsvp").json() == expected


# --- Devices ---

def test_device_register_flow(client):
    r = client.post("/api/device/register", json={"guestNumber": "1001", "fingerprint": "phone", "userAgent": "Safari"})
    assert r.status_code == 200
    data = r.json()
    assert data["authorized"] is True
    assert data["deviceCount"] == 1
    assert data["isNewRegistration"] is True
    assert "isRegistered" not in data

    r = client.post("/api/device/register", json={"guestNumber": "1001", "fingerprint": "phone"})
    assert r.json()["isRegistered"] is True
    assert r.json()["deviceCount"] == 1

    client.post("/api/device/register", json={"guestNumber": "1001", "fingerprint": "laptop"})
    r = client.post("/api/device/register", json={"guestNumber": "1001", "fingerprint": "tablet"})
    assert r.status_code == 403
    assert r.json()["authorized"] is False
    assert r.json()["deviceCount"] == 2

    r = client.get("/api/device/register", params={"guestNumber": "1001"})
    assert r.json() == {"deviceCount": 2, "guestNumber": "1001"}


def test_device_register_requires_fingerprint(client):
    r = client.post("/api/device/register", json={"guestNumber": "1001"})
    assert r.status_code == 400
    assert r.json() == {"error": "Device fingerprint is required"}


# --- Invitation landing ---

def test_open_invitation(client):
    _create(client)
    r = client.post("/api/invitations/1001/open", json={"fingerprint": "phone", "userAgent": "Safari"})
    assert r.status_code == 200
    data = r.json()
    assert data["guest"]["guestNumber"] == "1001"
    assert data["device"] == {"authorized": True, "deviceCount": 1}
    assert "coupleNames" in data["settings"]


def test_open_invitation_errors(client):
    _create(client)
    assert client.post("/api/invitations/12/open", json={"fingerprint": "fp"}).status_code == 400
    assert client.post("/api/invitations/abcd/open", json={"fingerprint": "fp"}).status_code == 400
    assert client.post("/api/invitations/1001/open", json={}).status_code == 400
    assert client.post("/api/invitations/5555/open", json={"fingerprint": "fp"}).status_code == 404

    client.post("/api/invitations/1001/open", json={"fingerprint": "a"})
    client.post("/api/invitations/1001/open", json={"fingerprint": "b"})
    r = client.post("/api/invitations/1001/open", json={"fingerprint": "c"})
    assert r.status_code == 403
    assert r.json()["deviceCount"] == 2


# --- Settings ---

def test_settings_defaults_and_merge(client):
    data = client.get("/api/settings").json()
    assert data["theme"] == "romantic"
    assert set(data["coupleNames"]) == {"groom", "bride"}
    bride = data["coupleNames"]["bride"]

    r = client.put("/api/settings", json={"venue": "Garden Hall", "coupleNames": {"groom": "Ali"}})
    assert r.status_code == 200
    data = r.json()
    assert data["venue"] == "Garden Hall"
    assert data["coupleNames"] == {"groom": "Ali", "bride": bride}
    assert data["theme"] == "romantic"

    assert client.get("/api/settings").json()["venue"] == "Garden Hall"


# --- Admin gate ---

def test_admin_gate(client, admin_passphrase):
    assert client.get("/api/guests").status_code == 401
    assert client.post("/api/guests", json={"name": "A"}).status_code == 401
    assert client.get("/api/stats").status_code == 401

    assert client.post("/api/admin/login", json={"password": "wrong"}).status_code == 401

    r = client.post("/api/admin/login", json={"password": admin_passphrase})
    assert r.status_code == 200
    token = r.json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    assert client.post("/api/guests", json={"name": "A"}, headers=headers).status_code == 200
    assert client.get("/api/guests", headers=headers).status_code == 200
    assert client.get("/api/guests", headers={"Authorization": "Bearer nope"}).status_code == 401

    # Guest-facing endpoints stay open
    assert client.get("/api/guests/1001").status_code == 200
    assert client.post("/api/rsvp", json={"guestNumber": "1001", "attending": False}).status_code == 200
    assert client.get("/api/settings").status_code == 200


def test_admin_login_without_passphrase(client):
    assert client.post("/api/admin/login", json={"password": "x"}).status_code == 400
