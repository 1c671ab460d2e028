"""
Qt installation service — package re-exports.

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → resolver → detection →
orchestration)::

    from src.core.services.qt_install import resolve_inputs, run_action
"""

# ── L1: Domain ──
from src.core.services.qt_install.domain.arch_defaults import default_arch  # noqa: F401
from src.core.services.qt_install.domain.cache_key import build_cache_key  # noqa: F401
from src.core.services.qt_install.domain.version_compare import compare_versions  # noqa: F401

# ── L2: Resolver ──
from src.core.services.qt_install.resolver.input_resolution import (  # noqa: F401
    default_host,
    resolve_inputs,
)

# ── L3: Detection ──
from src.core.services.qt_install.detection.host_detect import (  # noqa: F401
    detect_host_environment,
)
from src.core.services.qt_install.detection.install_dir import (  # noqa: F401
    locate_qt_arch_dir,
    read_host_prefix,
    tools_paths,
)

# ── L5: Orchestration ──
from src.core.services.qt_install.orchestration.orchestrator import (  # noqa: F401
    ActionResult,
    aqt_steps,
    bootstrap_steps,
    dependency_steps,
    run_action,
)
