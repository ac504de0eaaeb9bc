"""
Runtime: application boundary, sessions and hosts.
"""

from rivet.runtime.context import (
    Application,
    ApplicationFactory,
    SystemContext,
)
from rivet.runtime.session import Session
from rivet.runtime.headless import HeadlessRivet

__all__ = [
    "Application",
    "ApplicationFactory",
    "SystemContext",
    "Session",
    "HeadlessRivet",
]
