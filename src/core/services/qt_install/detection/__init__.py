"""
L3 Detection — read-only inspection of the host and the install tree.
"""

from src.core.services.qt_install.detection.aqt_version import (  # noqa: F401
    is_autodesktop_supported,
)
from src.core.services.qt_install.detection.host_detect import (  # noqa: F401
    detect_host_environment,
)
from src.core.services.qt_install.detection.install_dir import (  # noqa: F401
    companion_host_path,
    locate_qt_arch_dir,
    read_host_prefix,
    tools_paths,
)
