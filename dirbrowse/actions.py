"""Host-facing action inputs and directive outputs for the browser mode."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ActionKind(enum.Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    QUICK_SWITCH = "quick_switch"
    ACCEPT = "accept"
    DELETE_ENTRY = "delete_entry"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Action:
    """One user action reported by the host.

    ``target_mode`` is only meaningful for ``QUICK_SWITCH``.
    """

    kind: ActionKind
    target_mode: int | None = None

    @classmethod
    def quick_switch(cls, target_mode: int) -> Action:
        return cls(ActionKind.QUICK_SWITCH, target_mode=target_mode)


class DirectiveKind(enum.Enum):
    NEXT_DIALOG = "next_dialog"
    PREVIOUS_DIALOG = "previous_dialog"
    SWITCH_MODE = "switch_mode"
    RESET_DIALOG = "reset_dialog"
    RELOAD_DIALOG = "reload_dialog"
    MODE_EXIT = "mode_exit"


@dataclass(frozen=True)
class Directive:
    """Instruction returned to the host after an action.

    ``mode_index`` is set only for ``SWITCH_MODE``.
    """

    kind: DirectiveKind
    mode_index: int | None = None


NEXT_DIALOG = Directive(DirectiveKind.NEXT_DIALOG)
PREVIOUS_DIALOG = Directive(DirectiveKind.PREVIOUS_DIALOG)
RESET_DIALOG = Directive(DirectiveKind.RESET_DIALOG)
RELOAD_DIALOG = Directive(DirectiveKind.RELOAD_DIALOG)
MODE_EXIT = Directive(DirectiveKind.MODE_EXIT)


def switch_mode(mode_index: int) -> Directive:
    return Directive(DirectiveKind.SWITCH_MODE, mode_index=mode_index)


__all__ = [
    "ActionKind",
    "Action",
    "DirectiveKind",
    "Directive",
    "NEXT_DIALOG",
    "PREVIOUS_DIALOG",
    "RESET_DIALOG",
    "RELOAD_DIALOG",
    "MODE_EXIT",
    "switch_mode",
]
