"""
L5 Orchestration — sequences a whole action run.
"""

from src.core.services.qt_install.orchestration.orchestrator import (  # noqa: F401
    ActionResult,
    InstallStep,
    run_action,
)
