"""Port interfaces (Hexagonal Architecture)."""

from automate_bridge.ports.outbound import AutomationPort
