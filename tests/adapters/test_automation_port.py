"""Tests for AutomationPort protocol conformance."""

from automate_bridge.automate_client import AutomateClient, automate_service
from automate_bridge.ports.outbound import AutomationPort


class TestAutomationPortConformance:
    def test_client_is_port(self):
        assert isinstance(AutomateClient(), AutomationPort)

    def test_default_client_is_port(self):
        assert isinstance(automate_service, AutomationPort)

    def test_client_has_interface(self):
        client = AutomateClient()
        for name in ("check_health", "run_direct", "execute", "generate_actions",
                     "set_endpoint", "is_connected", "base_url", "state"):
            assert hasattr(client, name)
