from __future__ import annotations

from enum import Enum
from typing import Iterable


class Event(str, Enum):
    BLUR = 'onblur'
    CHANGE = 'onchange'
    CLICK = 'onclick'
    DOUBLE_CLICK = 'ondblclick'
    FOCUS = 'onfocus'
    INPUT = 'oninput'
    KEY_DOWN = 'onkeydown'
    KEY_UP = 'onkeyup'
    LOAD = 'onload'
    MOUSE_ENTER = 'onmouseenter'
    MOUSE_LEAVE = 'onmouseleave'
    SUBMIT = 'onsubmit'

    def __str__(self) -> str:
        return self.value


class Action:
    def compile(self) -> str:
        raise NotImplementedError


class ShowAlert(Action):
    def __init__(self, message: str) -> None:
        self.message = message

    def compile(self) -> str:
        return f"alert('{self.message}')"


class CustomAction(Action):
    def __init__(self, code: str) -> None:
        self.code = code

    def compile(self) -> str:
        return self.code


class _ElementClassAction(Action):
    method: str

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id

    def compile(self) -> str:
        return f"document.getElementById('{self.element_id}').classList.{self.method}('d-none')"


class ShowElement(_ElementClassAction):
    method = 'remove'


class HideElement(_ElementClassAction):
    method = 'add'


class ToggleElement(_ElementClassAction):
    method = 'toggle'


def compile_actions(actions: Iterable[Action]) -> str:
    # Actions run in the order given
    return '; '.join(a.compile() for a in actions)
