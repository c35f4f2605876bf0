"""API environments.

Kept in the domain layer so the settings, the client and the CLI share one
mapping from environment name to base URL.
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Named DodoPayments deployments."""

    LIVE_MODE = "live_mode"
    TEST_MODE = "test_mode"

    def base_url(self) -> str:
        """Root URL every request path is resolved against."""

        if self is Environment.TEST_MODE:
            return "https://test.dodopayments.com"
        return "https://live.dodopayments.com"

    def label(self) -> str:
        """Human readable label for the CLI."""

        return "Test mode" if self is Environment.TEST_MODE else "Live mode"
