"""
L2 Resolver — turns raw action inputs into ``ActionInputs``.
"""

from src.core.services.qt_install.resolver.input_resolution import (  # noqa: F401
    default_host,
    resolve_inputs,
)
