"""
Tests for the API router endpoints.
"""

import base64
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from deeplink.config.settings import Settings
from deeplink.container import DependencyContainer
from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.exceptions import InvalidProtocolError
from deeplink.main import app

client = TestClient(app)


def b64(text):
    return base64.b64encode(text.encode()).decode()


@pytest.fixture
def fresh_container(monkeypatch):
    monkeypatch.delenv("NGROK_PATH", raising=False)
    monkeypatch.setenv("DEEPLINK_WAIT_FOR_HOST", "1")
    container = DependencyContainer(Settings())
    with patch("deeplink.api.dependencies.container", container):
        yield container
    container.reset()


class TestProtocolAPI:
    """Test cases for the protocol endpoints."""

    def test_dispatch_success(self):
        command = ProtocolCommand(
            domain="bot", action="open", raw_args="path=cA==", args={"path": "cA=="}
        )
        with patch("deeplink.api.routers.get_dispatcher") as mock_dispatcher:
            mock_dispatcher.return_value.parse_and_dispatch.return_value = (command, True)

            response = client.post("/protocol", json={"url": "bfemulator://bot.open?path=cA=="})

            assert response.status_code == 200
            data = response.json()
            assert data["dispatched"] is True
            assert data["command"] == {
                "domain": "bot",
                "action": "open",
                "raw_args": "path=cA==",
                "args": {"path": "cA=="},
            }
            mock_dispatcher.return_value.parse_and_dispatch.assert_called_once_with(
                "bfemulator://bot.open?path=cA=="
            )

    def test_dispatch_invalid_protocol(self):
        with patch("deeplink.api.routers.get_dispatcher") as mock_dispatcher:
            mock_dispatcher.return_value.parse_and_dispatch.side_effect = InvalidProtocolError(
                "Invalid protocol url. Must start with 'bfemulator://'"
            )

            response = client.post("/protocol", json={"url": "http://bot.open"})

            assert response.status_code == 400
            assert response.json()["detail"] == (
                "Invalid protocol url. Must start with 'bfemulator://'"
            )

    def test_dispatch_missing_url(self):
        response = client.post("/protocol", json={})

        assert response.status_code == 422

    def test_parse_only(self, fresh_container):
        response = client.get(
            "/protocol/parse", params={"url": "bfemulator://LiveChat.Open?botUrl=abc"}
        )

        assert response.status_code == 200
        assert response.json()["domain"] == "livechat"
        assert response.json()["args"] == {"botUrl": "abc"}

    def test_parse_invalid(self, fresh_container):
        response = client.get("/protocol/parse", params={"url": "nope"})

        assert response.status_code == 400

    def test_unknown_route_is_not_dispatched(self, fresh_container):
        response = client.post("/protocol", json={"url": "bfemulator://foo.open"})

        assert response.status_code == 200
        assert response.json()["dispatched"] is False
        assert fresh_container.get_command_service().history() == []


class TestLiveChatFlow:
    """Live chat through the API with the host readiness gate enabled."""

    def test_live_chat_waits_for_host(self, fresh_container):
        url = "bfemulator://livechat.open?botUrl={}&msaAppId={}&msaPassword={}".format(
            b64("http://localhost:3978/api/messages"), b64("app"), b64("pw")
        )

        response = client.post("/protocol", json={"url": url})
        assert response.json()["dispatched"] is True

        bot = client.get("/bot/active").json()["bot"]
        assert bot["services"][0]["endpoint"] == "http://localhost:3978/api/messages"
        assert bot["services"][0]["app_id"] == "app"
        assert bot["services"][0]["app_password"] == "***"
        assert fresh_container.get_command_service().history() == []

        ready = client.post("/readiness/host").json()
        assert ready == {"gate": "host", "opened": True}

        history = client.get("/commands/history").json()["commands"]
        assert [c["name"] for c in history] == ["livechat:new"]
        assert history[0]["handled"] is False

        again = client.post("/readiness/host").json()
        assert again["opened"] is False
        assert len(client.get("/commands/history").json()["commands"]) == 1

    def test_history_does_not_expose_credentials(self, fresh_container):
        url = "bfemulator://livechat.open?botUrl={}&msaAppId={}&msaPassword={}".format(
            b64("http://localhost:3978/api/messages"), b64("app"), b64("s3cr3t")
        )
        client.post("/protocol", json={"url": url})
        client.post("/readiness/host")

        response = client.get("/commands/history")

        assert "s3cr3t" not in response.text
        endpoint = response.json()["commands"][0]["args"][0]
        assert endpoint["app_password"] == "***"
        assert endpoint["endpoint"] == "http://localhost:3978/api/messages"

    def test_bot_secret_is_masked_in_history(self, fresh_container):
        url = "bfemulator://bot.open?path={}&secret={}".format(
            b64("/bots/echo.bot"), b64("hunter2")
        )
        client.post("/protocol", json={"url": url})
        client.post("/readiness/host")

        response = client.get("/commands/history")

        assert "hunter2" not in response.text
        assert response.json()["commands"][0]["args"] == ["/bots/echo.bot", "***"]


class TestReadinessAPI:
    def test_tunnel_signal(self, fresh_container):
        assert client.post("/readiness/tunnel").json() == {"gate": "tunnel", "opened": True}
        assert client.post("/readiness/tunnel").json() == {"gate": "tunnel", "opened": False}

    def test_host_gate_disabled(self, monkeypatch):
        monkeypatch.setenv("DEEPLINK_WAIT_FOR_HOST", "0")
        container = DependencyContainer(Settings())
        with patch("deeplink.api.dependencies.container", container):
            response = client.post("/readiness/host")

        assert response.status_code == 404

    def test_no_active_bot(self, fresh_container):
        assert client.get("/bot/active").status_code == 404
