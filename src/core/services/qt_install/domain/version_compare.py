"""
L1 Domain — Version comparison (pure).

Compares dotted version strings against literal thresholds.
No I/O, no subprocess.
"""

from __future__ import annotations

import re

from src.core.errors import InputError

_VERSION_RE = re.compile(
    r"^[v=]?(?P<release>(?:[0-9]+|[x*])(?:\.(?:[0-9]+|[x*]))*)(?:-(?P<pre>[0-9A-Za-z.\-]+))?(?:\+[0-9A-Za-z.\-]+)?$",
    re.IGNORECASE,
)

_WILDCARDS = frozenset({"x", "X", "*"})

# operator → predicate on the three-way comparison result
_OPERATORS = {
    ">": lambda c: c > 0,
    ">=": lambda c: c >= 0,
    "=": lambda c: c == 0,
    "==": lambda c: c == 0,
    "<": lambda c: c < 0,
    "<=": lambda c: c <= 0,
    "!=": lambda c: c != 0,
}


def _parse_version(version: str) -> tuple[list[str], str]:
    """Split a version into release components and a pre-release tag."""
    match = _VERSION_RE.match(version.strip())
    if not match:
        raise InputError(f'Invalid version: "{version}"')
    return match.group("release").split("."), match.group("pre") or ""


def _compare_components(a: str, b: str) -> int:
    if a in _WILDCARDS or b in _WILDCARDS:
        return 0
    ai, bi = int(a), int(b)
    return (ai > bi) - (ai < bi)


def version_cmp(v1: str, v2: str) -> int:
    """Three-way compare two versions: -1, 0 or 1.

    Missing components count as zero, so ``"5.9"`` equals ``"5.9.0"``.
    ``x`` / ``*`` components match anything. A pre-release sorts before
    its release (``6.5.0-beta1`` < ``6.5.0``).
    """
    rel1, pre1 = _parse_version(v1)
    rel2, pre2 = _parse_version(v2)

    for i in range(max(len(rel1), len(rel2))):
        a = rel1[i] if i < len(rel1) else "0"
        b = rel2[i] if i < len(rel2) else "0"
        result = _compare_components(a, b)
        if result:
            return result

    if pre1 and not pre2:
        return -1
    if pre2 and not pre1:
        return 1
    return (pre1 > pre2) - (pre1 < pre2)


def compare_versions(v1: str, op: str, v2: str) -> bool:
    """Evaluate ``v1 <op> v2``.

    Args:
        v1: Left-hand version, e.g. ``"6.5.2"``.
        op: One of ``>``, ``>=``, ``=``, ``==``, ``<``, ``<=``, ``!=``.
        v2: Right-hand version, e.g. ``"6.0.0"``.

    Raises:
        InputError: If either version cannot be parsed.
        ValueError: If ``op`` is not a known operator.
    """
    predicate = _OPERATORS.get(op)
    if predicate is None:
        raise ValueError(f"Invalid operator: {op!r}. Expected one of {sorted(_OPERATORS)}")
    return predicate(version_cmp(v1, v2))
