from __future__ import annotations

import copy

from functools import partial
from typing import Any, ClassVar, Optional, Sequence, Type, TypeVar, Union

from .attributes import AriaAttribute, AttributeCollection, AttributeEntry, AttributeName, BooleanAttribute
from .events import Action, Event
from .style import StyleDeclaration

TAGS = (
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio',
    'b', 'base', 'bdi', 'bdo', 'blockquote', 'body', 'br', 'button',
    'canvas', 'caption', 'cite', 'code', 'col', 'colgroup',
    'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog', 'div', 'dl', 'dt',
    'em', 'embed',
    'fieldset', 'figcaption', 'figure', 'footer', 'form',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hgroup', 'hr', 'html',
    'i', 'iframe', 'img', 'input', 'ins',
    'kbd',
    'label', 'legend', 'li', 'link',
    'main', 'map', 'mark', 'math', 'menu', 'meta', 'meter',
    'nav', 'noscript',
    'object', 'ol', 'optgroup', 'option', 'output',
    'p', 'picture', 'pre', 'progress',
    'q',
    'rp', 'rt', 'ruby',
    's', 'samp', 'script', 'section', 'select', 'slot', 'small', 'source', 'span',
    'strong', 'style', 'sub', 'summary', 'sup', 'svg',
    'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th', 'thead',
    'time', 'title', 'tr', 'track',
    'u', 'ul',
    'var', 'video',
    'wbr',
)

SINGLETON_TAGS = (
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'source', 'track', 'wbr',
)


TTag = TypeVar('TTag', bound='Tag')


def attribute_name(key: str) -> str:
    return key.rstrip('_').replace('_', '-')


class Tag:
    tag_name: ClassVar[Optional[str]] = None

    attributes: AttributeCollection
    children: tuple

    @classmethod
    def __class_getitem__(cls: Type[TTag], _class: str) -> Type[TTag]:
        return partial(cls, _class=_class)

    def __init__(self, *children, _class='', **attrs) -> None:
        self.attributes = AttributeCollection()
        self.attributes.add_class(_class)
        self.children = children
        for key, value in attrs.items():
            if value is None or isinstance(value, bool):
                self.attributes.set_boolean(attribute_name(key), enabled=value is not False)
            else:
                self.attributes.set(attribute_name(key), value)

    def __call__(self: TTag, *children) -> TTag:
        new = self._copy()
        new.children = children
        return new

    @property
    def name(self) -> str:
        return self.tag_name or self.__class__.__name__

    def _copy(self: TTag) -> TTag:
        new = copy.copy(self)
        new.attributes = self.attributes.copy()
        return new

    def _with_attributes(self: TTag, method: str, *args, **kwargs) -> TTag:
        new = self._copy()
        getattr(new.attributes, method)(*args, **kwargs)
        return new

    def add_class(self: TTag, *tokens: Optional[str]) -> TTag:
        return self._with_attributes('add_class', *tokens)

    def custom_attribute(self: TTag, name: AttributeName, value: Any = None, enabled: bool = True) -> TTag:
        return self._with_attributes('set', name, value, enabled)

    def aria(self: TTag, name: Union[AriaAttribute, str], value: Any) -> TTag:
        return self._with_attributes('set_aria', name, value)

    def data(self: TTag, key: str, value: Any) -> TTag:
        return self._with_attributes('set_data', key, value)

    def add_event(self: TTag, name: Union[Event, str], actions: Sequence[Action]) -> TTag:
        return self._with_attributes('add_event', name, actions)

    def on_click(self: TTag, *actions: Action) -> TTag:
        return self.add_event(Event.CLICK, actions)

    def style(self: TTag, *declarations: StyleDeclaration, **properties: Any) -> TTag:
        declarations = (
            *declarations,
            *(StyleDeclaration(key, value) for key, value in properties.items()),
        )
        return self._with_attributes('add_style', *declarations)

    def disabled(self: TTag, enabled: bool = True) -> TTag:
        return self.custom_attribute(BooleanAttribute.DISABLED, enabled=enabled)

    def required(self: TTag, enabled: bool = True) -> TTag:
        return self.custom_attribute(BooleanAttribute.REQUIRED, enabled=enabled)

    def read_only(self: TTag, enabled: bool = True) -> TTag:
        return self.custom_attribute(BooleanAttribute.READ_ONLY, enabled=enabled)

    def merge_attributes(self: TTag, attributes: AttributeCollection) -> TTag:
        return self._with_attributes('merge', attributes)

    def leading_attributes(self) -> list[AttributeEntry]:
        return []

    def trailing_attributes(self) -> list[AttributeEntry]:
        return []

    def render_attributes(self) -> str:
        return self.attributes.to_html(self.leading_attributes(), self.trailing_attributes())

    def opening_tag(self) -> str:
        return f'<{" ".join(filter(None, [self.name, self.render_attributes()]))}>'

    def to_html(self) -> str:
        children = ''.join(
            c.to_html() if isinstance(c, Tag) else str(c)
            for c in self.children or ()
        )
        return f'{self.opening_tag()}{children}</{self.name}>'


class SingletonTag(Tag):
    def __init__(self, *children, _class='', **attrs) -> None:
        if children:
            raise TypeError(f'Singleton tag <{self.name}> cannot have children')
        super().__init__(_class=_class, **attrs)

    def __call__(self, *children):
        raise TypeError(f'Singleton tag <{self.name}> cannot have children')

    def opening_tag(self) -> str:
        return f'<{" ".join(filter(None, [self.name, self.render_attributes()]))} />'

    def to_html(self) -> str:
        return self.opening_tag()


def tag(name: str) -> Type[Tag]:
    if not name or any(c.isspace() for c in name):
        raise ValueError(f'Invalid tag name {name!r}')
    base = SingletonTag if name in SINGLETON_TAGS else Tag
    return type(name, (base, ), {'tag_name': name})


for t in TAGS:
    locals()[t] = tag(t)
