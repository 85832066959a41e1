import logging

import pytest
from fastapi_mail import FastMail
from fastapi_mail.errors import ConnectionErrors

from green_campus.exceptions import InternalError
from green_campus.services import EmailService, get_email_service
from green_campus.main import app


@pytest.fixture
def delivered(monkeypatch):
    sent = []

    async def fake_send_message(self, message, template_name=None):
        sent.append(message)

    monkeypatch.setattr(FastMail, "send_message", fake_send_message)
    return sent


@pytest.fixture
def smtp_down(monkeypatch):
    async def failing_send_message(self, message, template_name=None):
        raise ConnectionErrors("connection refused")

    monkeypatch.setattr(FastMail, "send_message", failing_send_message)


async def test_send_delivers_through_fastapi_mail(delivered):
    service = EmailService(host="smtp.example.com", port=587, username="", password="")
    await service.send("alice@example.com", "Hello", "Thanks for planting!")

    assert len(delivered) == 1
    message = delivered[0]
    assert message.subject == "Hello"
    assert [r.email for r in message.recipients] == ["alice@example.com"]
    assert message.body == "Thanks for planting!"


async def test_send_without_host_only_logs(delivered, caplog):
    service = EmailService(host="")
    with caplog.at_level(logging.INFO, logger="green_campus.services.email_service"):
        await service.send("alice@example.com", "Hello", "body")

    assert delivered == []
    assert "not delivered" in caplog.text


async def test_delivery_failure_is_internal_error(smtp_down):
    service = EmailService(host="smtp.example.com")
    with pytest.raises(InternalError):
        await service.send("alice@example.com", "Hello", "body")


def test_sweep_aborts_on_delivery_failure(client, alice, plant_tree, admin_headers, smtp_down):
    plant_tree(alice)
    app.dependency_overrides[get_email_service] = lambda: EmailService(host="smtp.example.com")

    resp = client.post("/api/care/notify-unwatered", headers=admin_headers)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to send email"}
