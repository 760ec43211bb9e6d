import asyncio
import logging
from datetime import date

import pytest

from app.config import settings
from app.publisher.client import PostResult, XPublisher
from scripts.post_countdown import run


def test_publisher_returns_post_result(fake_x_client):
    publisher = XPublisher(client=fake_x_client)
    result = asyncio.run(publisher.post("Faltam 17 dias para o início das aulas na FECAP 💀"))
    assert result == PostResult(id="1790000000000000001", text="Faltam 17 dias para o início das aulas na FECAP 💀")


def test_publisher_propagates_errors(failing_x_client):
    publisher = XPublisher(client=failing_x_client)
    with pytest.raises(RuntimeError, match="401"):
        asyncio.run(publisher.post("hello"))


def test_run_posts_computed_message(fake_x_client, monkeypatch):
    monkeypatch.setattr(settings, "institution_name", "FECAP")
    text = asyncio.run(run(date(2024, 7, 15), XPublisher(client=fake_x_client)))
    assert text == "Faltam 17 dias para o início das aulas na FECAP 💀"
    assert fake_x_client.posted == [text]


def test_run_logs_and_swallows_publish_failure(failing_x_client, caplog):
    with caplog.at_level(logging.ERROR, logger="ferias.post_countdown"):
        text = asyncio.run(run(date(2024, 8, 1), XPublisher(client=failing_x_client)))
    assert text.startswith("Faltam ")
    assert "Failed to post countdown" in caplog.text
    assert "401 Unauthorized" in caplog.text


def test_dry_run_does_not_post(fake_x_client):
    asyncio.run(run(date(2024, 8, 1), XPublisher(client=fake_x_client), dry_run=True))
    assert fake_x_client.posted == []
