import pytest


@pytest.fixture
def users(client):
    sender = client.post("/api/register", data={"full_name": "Alice", "email": "a@x.com", "password": "pw"}).json()["id"]
    receiver = client.post("/api/register", data={"full_name": "Bob", "email": "b@x.com", "password": "pw"}).json()["id"]
    return sender, receiver


def test_message_shows_in_inbox_and_sent(client, users):
    sender, receiver = users
    res = client.post(
        "/api/messages",
        json={"sender_id": sender, "receiver_id": receiver, "subject": "Pour schedule", "message_body": "Friday 6am"},
    )
    assert res.json()["message"] == "Sent"

    inbox = client.get(f"/api/messages/{receiver}").json()
    assert len(inbox) == 1
    assert inbox[0]["sender_name"] == "Alice"
    assert inbox[0]["message_body"] == "Friday 6am"

    sent = client.get(f"/api/messages/sent/{sender}").json()
    assert len(sent) == 1
    assert sent[0]["receiver_name"] == "Bob"

    assert client.get(f"/api/messages/{sender}").json() == []


def test_sending_posts_a_notification(client, users):
    sender, receiver = users
    client.post("/api/messages", json={"sender_id": sender, "receiver_id": receiver, "subject": "Hi"})

    notes = client.get("/api/notifications").json()
    assert len(notes) == 1
    assert notes[0]["message"] == "New Message: Hi"
    assert notes[0]["type"] == "Info"


def test_notifications_feed_is_capped_and_newest_first(client, users):
    sender, receiver = users
    for i in range(12):
        client.post("/api/messages", json={"sender_id": sender, "receiver_id": receiver, "subject": f"m{i}"})

    notes = client.get("/api/notifications").json()
    assert len(notes) == 10
    assert notes[0]["message"] == "New Message: m11"


def test_clear_notifications(client, users):
    sender, receiver = users
    client.post("/api/messages", json={"sender_id": sender, "receiver_id": receiver, "subject": "Hi"})

    res = client.delete("/api/notifications")
    assert res.json()["message"] == "Cleared"
    assert client.get("/api/notifications").json() == []
    # Messages themselves stay
    assert len(client.get(f"/api/messages/{receiver}").json()) == 1
