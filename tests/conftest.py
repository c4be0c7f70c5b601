"""Print both sides of failed equality comparisons.

:created: 2026-10-17
"""

from typing import Any


def pytest_assertrepr_compare(
    config: Any, op: str, left: object, right: object
) -> list[str] | None:
    """Print both sides of == and != comparisons."""
    del config
    if op in ("==", "!="):
        return [f"{left!r} {op} {right!r}"]
    return None
