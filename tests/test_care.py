from datetime import date, timedelta

WILLOW = 4
OAK = 1


def _water(client, headers, tree_id, days_ago):
    resp = client.post(
        f"/api/care/{tree_id}/activities",
        json={"activity_type": "watering", "activity_date": (date.today() - timedelta(days=days_ago)).isoformat()},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_log_and_list_activities(client, alice, plant_tree):
    tree_id = plant_tree(alice)["id"]
    client.post(
        f"/api/care/{tree_id}/activities",
        json={"activity_type": "pruning", "activity_date": "2024-03-01", "notes": "lower branches"},
        headers=alice,
    )
    client.post(
        f"/api/care/{tree_id}/activities",
        json={"activity_type": "fertilizing", "activity_date": "2024-04-01"},
        headers=alice,
    )

    activities = client.get(f"/api/care/{tree_id}/activities", headers=alice).json()
    assert [a["activity_type"] for a in activities] == ["fertilizing", "pruning"]
    assert activities[1]["notes"] == "lower branches"


def test_activity_type_is_validated(client, alice, plant_tree):
    tree_id = plant_tree(alice)["id"]
    resp = client.post(
        f"/api/care/{tree_id}/activities",
        json={"activity_type": "singing", "activity_date": "2024-03-01"},
        headers=alice,
    )
    assert resp.status_code == 400


def test_willow_watered_three_days_ago_needs_water(client, alice, plant_tree):
    tree_id = plant_tree(alice, species_id=WILLOW)["id"]
    _water(client, alice, tree_id, days_ago=3)

    status = client.get(f"/api/care/{tree_id}/watering-status", headers=alice).json()
    assert status["interval_days"] == 3
    assert status["days_since_watering"] == 3
    assert status["needs_watering"] is True


def test_willow_watered_two_days_ago_is_fine(client, alice, plant_tree):
    tree_id = plant_tree(alice, species_id=WILLOW)["id"]
    _water(client, alice, tree_id, days_ago=2)

    status = client.get(f"/api/care/{tree_id}/watering-status", headers=alice).json()
    assert status["needs_watering"] is False


def test_never_watered_tree_needs_water(client, alice, plant_tree):
    tree_id = plant_tree(alice)["id"]
    status = client.get(f"/api/care/{tree_id}/watering-status", headers=alice).json()
    assert status["last_watered"] is None
    assert status["interval_days"] == 7
    assert status["needs_watering"] is True


def test_notify_unwatered_emails_owners(client, alice, bob, plant_tree, admin_headers, outbox):
    dry_willow = plant_tree(alice, species_id=WILLOW)["id"]
    _water(client, alice, dry_willow, days_ago=5)
    watered_oak = plant_tree(alice, species_id=OAK)["id"]
    _water(client, alice, watered_oak, days_ago=1)
    plant_tree(bob, species_id=OAK)

    resp = client.post("/api/care/notify-unwatered", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["notified"] == 2
    assert sorted(mail["to"] for mail in outbox.sent) == ["alice@example.com", "bob@example.com"]
    willow_mail = next(mail for mail in outbox.sent if mail["to"] == "alice@example.com")
    assert "Willow Tree" in willow_mail["subject"]


def test_send_admin_message(client, alice, admin_headers, outbox):
    resp = client.post(
        "/api/care/send-admin-message",
        json={"email": "alice@example.com", "subject": "Hello", "message": "Thanks for planting!"},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert outbox.sent == [{"to": "alice@example.com", "subject": "Hello", "body": "Thanks for planting!"}]


def test_send_admin_message_unknown_user(client, admin_headers, outbox):
    resp = client.post(
        "/api/care/send-admin-message",
        json={"email": "ghost@example.com", "subject": "Hello", "message": "Anyone?"},
        headers=admin_headers,
    )
    assert resp.status_code == 404
    assert outbox.sent == []


def test_admin_endpoints_reject_users(client, alice):
    resp = client.post(
        "/api/care/send-admin-message",
        json={"email": "alice@example.com", "subject": "Hi", "message": "x"},
        headers=alice,
    )
    assert resp.status_code == 403
