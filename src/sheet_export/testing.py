"""Test hooks for sheet_export library.

This module provides hooks for testing without mocking or monkeypatching.
Production code calls hooks directly; tests set hooks to fakes.

Usage:
    from sheet_export.testing import hooks, reset_hooks

    # In tests:
    def test_something() -> None:
        hooks.create_workbook = _fake_workbook_factory
        # ... test code ...

    # Use reset_hooks() in conftest.py fixtures to restore defaults.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from sheet_export._protocols.openpyxl import WorkbookProtocol, _create_workbook
from sheet_export.formats import save_workbook

# ---------------------------------------------------------------------------
# Type aliases for hooks
# ---------------------------------------------------------------------------

CreateWorkbookFn = Callable[[], WorkbookProtocol]
SaveWorkbookFn = Callable[[WorkbookProtocol, Path, str], None]


# ---------------------------------------------------------------------------
# Hooks container
# ---------------------------------------------------------------------------


class _HooksContainer:
    """Container for all hookable functions.

    Hooks are set to production implementations at module load time.
    Tests override hooks to use fakes.
    """

    create_workbook: CreateWorkbookFn
    save_workbook: SaveWorkbookFn


hooks = _HooksContainer()


def reset_hooks() -> None:
    """Restore every hook to its production implementation."""
    hooks.create_workbook = _create_workbook
    hooks.save_workbook = save_workbook


reset_hooks()


__all__ = [
    "CreateWorkbookFn",
    "SaveWorkbookFn",
    "hooks",
    "reset_hooks",
]
