from __future__ import annotations

import sys

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, TypeVar, Union

from .events import Action, Event, compile_actions
from .style import StyleDeclaration, render_declarations

TAttributeCollection = TypeVar('TAttributeCollection', bound='AttributeCollection')


class AriaAttribute(str, Enum):
    ATOMIC = 'atomic'
    AUTOCOMPLETE = 'autocomplete'
    BUSY = 'busy'
    CHECKED = 'checked'
    COL_COUNT = 'colcount'
    CONTROLS = 'controls'
    CURRENT = 'current'
    DESCRIBED_BY = 'describedby'
    DETAILS = 'details'
    DISABLED = 'disabled'
    EXPANDED = 'expanded'
    HAS_POPUP = 'haspopup'
    HIDDEN = 'hidden'
    INVALID = 'invalid'
    LABEL = 'label'
    LABELLED_BY = 'labelledby'
    LEVEL = 'level'
    LIVE = 'live'
    MODAL = 'modal'
    MULTILINE = 'multiline'
    MULTISELECTABLE = 'multiselectable'
    ORIENTATION = 'orientation'
    OWNS = 'owns'
    PLACEHOLDER = 'placeholder'
    POS_IN_SET = 'posinset'
    PRESSED = 'pressed'
    READ_ONLY = 'readonly'
    REQUIRED = 'required'
    ROLE_DESCRIPTION = 'roledescription'
    SELECTED = 'selected'
    SET_SIZE = 'setsize'
    SORT = 'sort'
    VALUE_MAX = 'valuemax'
    VALUE_MIN = 'valuemin'
    VALUE_NOW = 'valuenow'
    VALUE_TEXT = 'valuetext'

    def __str__(self) -> str:
        return self.value


class BooleanAttribute(str, Enum):
    ALLOW_FULLSCREEN = 'allowfullscreen'
    ASYNC = 'async'
    AUTOFOCUS = 'autofocus'
    AUTOPLAY = 'autoplay'
    CHECKED = 'checked'
    CONTROLS = 'controls'
    DEFER = 'defer'
    DISABLED = 'disabled'
    HIDDEN = 'hidden'
    INERT = 'inert'
    LOOP = 'loop'
    MULTIPLE = 'multiple'
    MUTED = 'muted'
    NO_VALIDATE = 'novalidate'
    OPEN = 'open'
    READ_ONLY = 'readonly'
    REQUIRED = 'required'
    SELECTED = 'selected'

    def __str__(self) -> str:
        return self.value


AttributeName = Union[BooleanAttribute, str]


@dataclass(frozen=True)
class AttributeEntry:
    name: str
    value: Optional[str] = None
    enabled: bool = True

    def __post_init__(self):
        name = str(self.name)
        if not name or any(c.isspace() for c in name):
            raise ValueError(f'Invalid attribute name {self.name!r}')
        object.__setattr__(self, 'name', name)
        if self.value is not None:
            object.__setattr__(self, 'value', str(self.value))

    def to_html(self) -> str:
        if self.value is None:
            return self.name
        return f'{self.name}="{self.value}"'


def split_classes(tokens: Iterable[Optional[str]]) -> set[str]:
    return {
        t
        for token in tokens
        if token
        for t in token.split()
    }


class AttributeCollection:
    """Attributes of a single element.

    Custom entries are keyed by name with last write winning. Styles are kept
    per property and compiled into one `style` entry. Classes are rendered
    sorted and always last, after any core attributes of the element.
    """

    def __init__(self) -> None:
        self.classes: set[str] = set()
        self.class_enabled = True
        self._entries: dict[str, AttributeEntry] = {}
        self._styles: dict[str, StyleDeclaration] = {}

    def __bool__(self) -> bool:
        return bool((self.classes and self.class_enabled) or self.entries())

    def __repr__(self) -> str:
        return f'<AttributeCollection {self.to_html()!r}>'

    def copy(self: TAttributeCollection) -> TAttributeCollection:
        new = self.__class__()
        new.classes = set(self.classes)
        new.class_enabled = self.class_enabled
        new._entries = dict(self._entries)
        new._styles = dict(self._styles)
        return new

    def get(self, name: AttributeName) -> Optional[AttributeEntry]:
        return self._entries.get(str(name))

    def add_class(self, *tokens: Optional[str]) -> None:
        tokens = split_classes(tokens)
        if tokens:
            self.classes |= tokens
            self.class_enabled = True

    def set(self, name: AttributeName, value: Optional[str] = None, enabled: bool = True) -> None:
        entry = AttributeEntry(name, value, enabled)
        if entry.name == 'class':
            if not enabled:
                self.class_enabled = False
                return
            print(f'Warning: class passed as custom attribute, adding {value!r} as class tokens', file=sys.stderr)
            self.class_enabled = True
            self.add_class(entry.value)
            return
        if entry.name == 'style':
            # A direct write replaces any accumulated declarations
            self._styles.clear()
        self._entries[entry.name] = entry

    def set_boolean(self, name: AttributeName, enabled: bool = True) -> None:
        self.set(name, None, enabled)

    def set_aria(self, name: Union[AriaAttribute, str], value: str) -> None:
        name = str(name).lower()
        if name.startswith('aria-'):
            name = name[len('aria-'):]
        self.set(f'aria-{name}', value)

    def set_data(self, key: str, value: str) -> None:
        self.set(f'data-{key.lower()}', value)

    def add_event(self, name: Union[Event, str], actions: Sequence[Action]) -> None:
        name = AttributeEntry(name).name
        if not actions:
            return
        self.set(name, compile_actions(actions))

    def add_style(self, *declarations: StyleDeclaration) -> None:
        for d in declarations:
            self._styles[d.property] = d

    @property
    def styles(self) -> list[StyleDeclaration]:
        return sorted(self._styles.values(), key=lambda d: d.property)

    def merge(self, other: AttributeCollection) -> None:
        self.add_class(*other.classes)
        self._entries.update(other._entries)
        self._styles.update(other._styles)

    def _all_entries(self) -> dict[str, AttributeEntry]:
        entries = dict(self._entries)
        if self._styles:
            entries['style'] = AttributeEntry('style', render_declarations(self._styles.values()))
        return entries

    def entries(self) -> list[AttributeEntry]:
        return sorted(
            (e for e in self._all_entries().values() if e.enabled),
            key=lambda e: e.name,
        )

    def to_html(self, leading: Sequence[AttributeEntry] = (), trailing: Sequence[AttributeEntry] = ()) -> str:
        entries = self._all_entries()
        core_names = {e.name for e in (*leading, *trailing)}

        # Custom entries named like a core attribute take the core position
        def core(core_entries):
            return [entries.get(e.name, e) for e in core_entries]

        attrs = [
            *core(leading),
            *(e for e in self.entries() if e.name not in core_names),
            *core(trailing),
        ]
        if self.classes and self.class_enabled:
            attrs.append(AttributeEntry('class', ' '.join(sorted(self.classes))))

        return ' '.join(e.to_html() for e in attrs if e.enabled)
