"""
L1 Domain — pure logic: version comparison, arch defaults, cache keys,
command assembly. No I/O, no subprocess.
"""

from src.core.services.qt_install.domain.arch_defaults import default_arch  # noqa: F401
from src.core.services.qt_install.domain.cache_key import build_cache_key  # noqa: F401
from src.core.services.qt_install.domain.version_compare import (  # noqa: F401
    compare_versions,
    version_cmp,
)
