"""
Test protocol version negotiation and session recording on initialize.
"""
import pytest

from vyos_mcp import __version__
from vyos_mcp.mcp import INVALID_PARAMS, INVALID_REQUEST, JsonRpcError, NegotiatingInitializeHandler
from vyos_mcp.models import ProtocolVersion, SessionState


def initialize_params(version="2025-03-26", **overrides):
    params = {
        "protocolVersion": version,
        "capabilities": {"roots": {"listChanged": True}, "sampling": {}},
        "clientInfo": {"name": "test-client", "version": "0.3.1"},
    }
    params.update(overrides)
    return params


@pytest.fixture
def handler():
    return NegotiatingInitializeHandler()


class TestNegotiation:
    @pytest.mark.parametrize("version", [v.value for v in ProtocolVersion])
    def test_supported_version_echoed(self, handler, version):
        result = handler.handle(initialize_params(version), SessionState())
        assert result["protocolVersion"] == version

    @pytest.mark.parametrize(
        "version", ["2099-01-01", "", "latest", None, 20250618, ["2025-06-18"]]
    )
    def test_unsupported_or_malformed_falls_back(self, handler, version):
        result = handler.handle(initialize_params(version), SessionState())
        assert result["protocolVersion"] == "2025-06-18"

    def test_configured_default(self):
        handler = NegotiatingInitializeHandler(default=ProtocolVersion.V2024_11_05)
        result = handler.handle(initialize_params("1999-12-31"), SessionState())
        assert result["protocolVersion"] == "2024-11-05"

    def test_missing_version_falls_back(self, handler):
        params = initialize_params()
        del params["protocolVersion"]
        assert handler.handle(params, SessionState())["protocolVersion"] == "2025-06-18"


class TestInitializeResult:
    def test_capabilities_and_server_info(self, handler):
        result = handler.handle(initialize_params(), SessionState())

        assert set(result["capabilities"]) == {"tools", "logging", "completions"}
        assert result["serverInfo"] == {"name": "VyOS Router", "version": __version__}


class TestSessionRecording:
    def test_client_recorded(self, handler):
        session = SessionState()
        assert not session.initialized

        handler.handle(initialize_params("2025-03-26"), session)

        assert session.initialized
        assert session.protocol_version == ProtocolVersion.V2025_03_26
        assert session.client_name == "test-client"
        assert session.client_version == "0.3.1"
        assert session.client_capabilities == {"roots": {"listChanged": True}, "sampling": {}}

    def test_recorded_only_once(self, handler):
        session = SessionState()
        handler.handle(initialize_params(), session)

        with pytest.raises(JsonRpcError) as exc_info:
            handler.handle(initialize_params(clientInfo={"name": "other", "version": "9"}), session)

        assert exc_info.value.code == INVALID_REQUEST
        assert session.client_name == "test-client"

    def test_minimal_params(self, handler):
        session = SessionState()
        handler.handle({"protocolVersion": "2025-06-18"}, session)
        assert session.client_name == ""
        assert session.client_capabilities == {}

    def test_unreadable_params(self, handler):
        session = SessionState()
        with pytest.raises(JsonRpcError) as exc_info:
            handler.handle(initialize_params(capabilities="none"), session)
        assert exc_info.value.code == INVALID_PARAMS
        assert not session.initialized
