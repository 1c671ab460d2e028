"""
L1 Domain — Cache key construction (pure).

Folds the resolved inputs into the key used for the runner's archive
cache. Identical inputs always give identical keys.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from src.core.models.inputs import ActionInputs
from src.core.services.qt_install.data.constants import MAX_CACHE_KEY_LENGTH


def _key_groups(inputs: ActionInputs, os_release: str) -> list[Iterable[str]]:
    # Order matters: changing it invalidates every existing cache entry.
    return [
        [
            inputs.host.value,
            os_release,
            inputs.target.value,
            inputs.arch,
            inputs.version,
            inputs.dir,
            inputs.py7zr_version,
            inputs.aqt_source,
            inputs.aqt_version,
            "official" if inputs.use_official else "",
        ],
        inputs.modules,
        inputs.archives,
        inputs.extra,
        inputs.tools,
        ["src"] if inputs.src else [],
        inputs.src_archives,
        ["doc"] if inputs.doc else [],
        inputs.doc_archives,
        inputs.doc_modules,
        ["example"] if inputs.example else [],
        inputs.example_archives,
        inputs.example_modules,
    ]


def build_cache_key(inputs: ActionInputs, os_release: str) -> str:
    """Build the cache key for a run.

    Empty fields contribute nothing. Commas are replaced with ``-``
    because the cache store rejects them. Keys longer than 512
    characters collapse to ``<prefix>-<sha256 of the full key>``.
    """
    cache_key = inputs.cache_key_prefix
    for group in _key_groups(inputs, os_release):
        for item in group:
            if item:
                cache_key += f"-{item}"

    cache_key = cache_key.replace(",", "-")

    if len(cache_key) > MAX_CACHE_KEY_LENGTH:
        digest = hashlib.sha256(cache_key.encode("utf-8")).hexdigest()
        # An oversized prefix alone must not push the key past the limit
        prefix = inputs.cache_key_prefix[: MAX_CACHE_KEY_LENGTH - len(digest) - 1]
        cache_key = f"{prefix}-{digest}"
    return cache_key
