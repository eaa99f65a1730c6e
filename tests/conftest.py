"""Shared pytest setup.

Graph fixtures live in ``tests/algorithms/sample_graphs.py`` and are loaded
as a plugin by module name, which keeps pytest's assertion rewriting active
for them. The lookup is skipped when only a subtree without that module is
collected.
"""

from __future__ import annotations

from importlib.util import find_spec

_FIXTURE_MODULES = ("tests.algorithms.sample_graphs",)

pytest_plugins: list[str] = [
    module for module in _FIXTURE_MODULES if find_spec(module) is not None
]
