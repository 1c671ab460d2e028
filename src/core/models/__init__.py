"""
Domain models — Pydantic types for the action.

All models are re-exported here for convenient access:

    from src.core.models import ActionInputs, HostEnvironment, Receipt
"""

from src.core.models.action import Receipt
from src.core.models.host import HostEnvironment
from src.core.models.inputs import ActionInputs, Host, InstallDeps, Target

__all__ = [
    # inputs.py
    "ActionInputs",
    "Host",
    # host.py
    "HostEnvironment",
    "InstallDeps",
    # action.py
    "Receipt",
    "Target",
]
