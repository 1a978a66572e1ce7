from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, TYPE_CHECKING

from .attributes import AttributeEntry
from .html import SingletonTag, Tag

if TYPE_CHECKING:
    from .config import RenderContext


class ButtonType(str, Enum):
    PLAIN = 'button'
    SUBMIT = 'submit'
    RESET = 'reset'


class Role(str, Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    SUCCESS = 'success'
    DANGER = 'danger'
    WARNING = 'warning'
    INFO = 'info'
    LIGHT = 'light'
    DARK = 'dark'


class TextFieldType(str, Enum):
    TEXT = 'text'
    EMAIL = 'email'
    NUMBER = 'number'
    PASSWORD = 'password'
    SEARCH = 'search'
    TEL = 'tel'
    URL = 'url'


class HighlighterTheme(str, Enum):
    ATOM_DARK = 'atom-dark'
    DRACULA = 'dracula'
    GITHUB_DARK = 'github-dark'
    GITHUB_LIGHT = 'github-light'
    NORD = 'nord'
    OKAIDIA = 'okaidia'
    SOLARIZED_LIGHT = 'solarized-light'
    TWILIGHT = 'twilight'
    XCODE_DARK = 'xcode-dark'
    XCODE_LIGHT = 'xcode-light'


class Button(Tag):
    tag_name = 'button'

    def __init__(self, *children, type: ButtonType = ButtonType.PLAIN, _class='', **attrs) -> None:
        super().__init__(*children, _class=_class, **attrs)
        self.type = ButtonType(type)
        self.attributes.add_class('btn')

    def role(self, role: Role) -> Button:
        return self.add_class(f'btn-{Role(role).value}')

    def leading_attributes(self) -> list[AttributeEntry]:
        return [AttributeEntry('type', self.type.value)]


class TextField(SingletonTag):
    tag_name = 'input'

    def __init__(self, placeholder: Optional[str] = None, type: TextFieldType = TextFieldType.TEXT, _class='', **attrs) -> None:
        super().__init__(_class=_class, **attrs)
        self.placeholder = placeholder
        self.type = TextFieldType(type)
        self.attributes.add_class('form-control')

    def trailing_attributes(self) -> list[AttributeEntry]:
        attrs = [AttributeEntry('type', self.type.value)]
        if self.placeholder is not None:
            attrs.append(AttributeEntry('placeholder', self.placeholder))
        return attrs


class MetaLink(SingletonTag):
    tag_name = 'link'

    def __init__(self, href: str, rel: str, _class='', **attrs) -> None:
        super().__init__(_class=_class, **attrs)
        self.href = href
        self.rel = rel

    def leading_attributes(self) -> list[AttributeEntry]:
        return [AttributeEntry('href', self.href), AttributeEntry('rel', self.rel)]

    @classmethod
    def highlighter_theme_links(
        cls,
        themes: Iterable[HighlighterTheme],
        context: Optional[RenderContext] = None,
    ) -> list[MetaLink]:
        base_path = context.base_path if context is not None else '/'
        if not base_path.endswith('/'):
            base_path += '/'

        return [
            cls(href=f'{base_path}css/prism-{theme.value}.css', rel='stylesheet')
            .data('highlight-theme', theme.value)
            for theme in sorted({HighlighterTheme(t) for t in themes}, key=lambda t: t.value)
        ]
