"""
Bundled applications and the name -> factory registry.
"""

from rivet.apps.shell import shell_application
from rivet.apps.calculator import calculator_application
from rivet.apps.about import about_application
from rivet.apps.log_viewer import log_viewer_application

APPLICATIONS = {
    "shell": shell_application,
    "calculator": calculator_application,
    "about": about_application,
    "logviewer": log_viewer_application,
}


def get_application(name: str):
    """
    Look up an application factory.

    Raises:
        KeyError: If no application is registered under name
    """
    try:
        return APPLICATIONS[name]
    except KeyError:
        raise KeyError(
            f"Unknown application {name!r}; available: {', '.join(sorted(APPLICATIONS))}"
        ) from None


__all__ = [
    "APPLICATIONS",
    "get_application",
    "shell_application",
    "calculator_application",
    "about_application",
    "log_viewer_application",
]
