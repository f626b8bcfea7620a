"""Shared keybinding contract for wizard screens."""

from __future__ import annotations

from typing import TypeAlias

Binding: TypeAlias = tuple[str, str, str]

QUIT_Q_BINDING: Binding = ("q", "quit", "Quit")
NEXT_CTRL_N_BINDING: Binding = ("ctrl+n", "next_step", "Next")
BACK_CTRL_B_BINDING: Binding = ("ctrl+b", "go_back", "Back")
NAV_DOWN_J_BINDING: Binding = ("j", "cursor_down", "Down")
NAV_UP_K_BINDING: Binding = ("k", "cursor_up", "Up")
FILTER_F_BINDING: Binding = ("f", "cycle_filter", "Filter")
FINISH_ENTER_BINDING: Binding = ("enter", "finish", "Finish")


def compose_bindings(*bindings: Binding) -> list[Binding]:
    """Return keybinding tuples in order."""
    return list(bindings)


def with_step_bindings(*bindings: Binding) -> list[Binding]:
    """Prefix bindings with the global wizard contract."""
    return compose_bindings(
        QUIT_Q_BINDING,
        NEXT_CTRL_N_BINDING,
        BACK_CTRL_B_BINDING,
        *bindings,
    )
