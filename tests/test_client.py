"""
Unit tests for the iControl REST device client.
"""

from unittest.mock import Mock

import pytest
import requests

from bigippg.client import CLIENTS, IControlRestClient, create_client, get_available_client_types
from bigippg.config import ProviderConfig
from bigippg.errors import APIError, ConnectionFailedError, NotFoundError
from bigippg.identifiers import ResourceIdentifier
from bigippg.version import BuildInfo


def _response(status_code=200, body=None, text=None):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if text is None:
        text = "" if body is None else "{...}"
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def config():
    return ProviderConfig(address="10.0.0.1", port="8443", username="admin", password="secret")


@pytest.fixture
def session():
    session = requests.Session()
    session.request = Mock(return_value=_response(200, {"name": "web"}))
    return session


@pytest.fixture
def client(config, session):
    return IControlRestClient(config, BuildInfo(version="1.0.0", host_version="1.5.7"), session)


class TestClientSetup:
    """Tests for client construction."""

    def test_session_headers_and_auth(self, client, session):
        """Test that credentials and identification are set on the session."""
        assert session.auth == ("admin", "secret")
        assert session.verify is False
        assert session.headers["User-Agent"] == "Terraform/1.5.7/terraform-provider-bigip/1.0.0"
        assert session.headers["Content-Type"] == "application/json"

    def test_factory(self, config):
        """Test creating a client through the registry."""
        client = create_client("icontrol_rest", config)
        assert isinstance(client, IControlRestClient)
        assert client.get_client_name() == "icontrol_rest"
        assert get_available_client_types() == sorted(CLIENTS)

    def test_factory_unknown_type(self, config):
        """Test that unknown client types are rejected."""
        with pytest.raises(ValueError) as exc_info:
            create_client("soap", config)
        assert "icontrol_rest" in str(exc_info.value)


class TestClientRequests:
    """Tests for monitor requests."""

    def test_get_monitor(self, client, session):
        """Test GET of a partitioned monitor."""
        result = client.get_monitor("http", ResourceIdentifier("Common", "web"))
        assert result == {"name": "web"}
        session.request.assert_called_once_with(
            "GET",
            "https://10.0.0.1:8443/mgmt/tm/ltm/monitor/http/~Common~web",
            json=None,
            timeout=30,
        )

    def test_create_monitor_posts_to_collection(self, client, session):
        """Test that create POSTs the payload to the type collection."""
        payload = {"name": "web", "partition": "Common", "interval": 5}
        client.create_monitor("http", payload)
        session.request.assert_called_once_with(
            "POST",
            "https://10.0.0.1:8443/mgmt/tm/ltm/monitor/http",
            json=payload,
            timeout=30,
        )

    def test_modify_monitor_patches(self, client, session):
        """Test that modify PATCHes the object URL."""
        client.modify_monitor("tcp", ResourceIdentifier("Common", "db"), {"interval": 9})
        args, kwargs = session.request.call_args
        assert args == ("PATCH", "https://10.0.0.1:8443/mgmt/tm/ltm/monitor/tcp/~Common~db")
        assert kwargs["json"] == {"interval": 9}

    def test_delete_with_empty_body(self, client, session):
        """Test that an empty successful response is accepted."""
        session.request.return_value = _response(200, text="")
        assert client.delete_monitor("http", ResourceIdentifier("Common", "web")) is None

    def test_not_found(self, client, session):
        """Test that 404 raises NotFoundError."""
        session.request.return_value = _response(404, {"code": 404, "message": "not found"})
        with pytest.raises(NotFoundError) as exc_info:
            client.get_monitor("http", ResourceIdentifier("Common", "gone"))
        assert exc_info.value.status_code == 404
        assert "/Common/gone" in str(exc_info.value)

    def test_device_error_message(self, client, session):
        """Test that the device's message ends up in the APIError."""
        session.request.return_value = _response(
            400, {"code": 400, "message": "01020066:3: The requested monitor already exists"}
        )
        with pytest.raises(APIError) as exc_info:
            client.create_monitor("http", {"name": "web", "partition": "Common"})
        assert exc_info.value.status_code == 400
        assert "already exists" in exc_info.value.details

    def test_error_without_json(self, client, session):
        """Test that a non-JSON error body is reported as text."""
        session.request.return_value = _response(500, text="Internal Server Error")
        with pytest.raises(APIError) as exc_info:
            client.get_monitor("http", ResourceIdentifier("Common", "web"))
        assert exc_info.value.details == "Internal Server Error"

    @pytest.mark.parametrize("body, text", [(None, "null"), (500, "500"), (["bad gateway"], '["bad gateway"]')])
    def test_error_with_non_object_json(self, client, session, body, text):
        """Test that a JSON error body that is not an object is reported as text."""
        response = _response(502, text=text)
        response.json.side_effect = None
        response.json.return_value = body
        session.request.return_value = response
        with pytest.raises(APIError) as exc_info:
            client.get_monitor("http", ResourceIdentifier("Common", "web"))
        assert exc_info.value.status_code == 502
        assert exc_info.value.details == text

    def test_invalid_json(self, client, session):
        """Test that an unparseable success body raises APIError."""
        session.request.return_value = _response(200, text="<html>")
        with pytest.raises(APIError):
            client.get_monitor("http", ResourceIdentifier("Common", "web"))

    def test_timeout(self, client, session):
        """Test that timeouts raise ConnectionFailedError."""
        session.request.side_effect = requests.exceptions.Timeout()
        with pytest.raises(ConnectionFailedError) as exc_info:
            client.get_monitor("http", ResourceIdentifier("Common", "web"))
        assert "timed out after 30 seconds" in str(exc_info.value)

    def test_connection_error(self, client, session):
        """Test that connection failures raise ConnectionFailedError."""
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(ConnectionFailedError):
            client.get_monitor("http", ResourceIdentifier("Common", "web"))
