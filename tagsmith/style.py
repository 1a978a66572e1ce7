from __future__ import annotations

import re

from enum import Enum
from typing import Any, Iterable, Union

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


class Property(str, Enum):
    ACCENT_COLOR = 'accent-color'
    ALIGN_CONTENT = 'align-content'
    ALIGN_ITEMS = 'align-items'
    ALIGN_SELF = 'align-self'
    ANIMATION = 'animation'
    ASPECT_RATIO = 'aspect-ratio'
    BACKGROUND = 'background'
    BACKGROUND_COLOR = 'background-color'
    BACKGROUND_IMAGE = 'background-image'
    BACKGROUND_POSITION = 'background-position'
    BACKGROUND_REPEAT = 'background-repeat'
    BACKGROUND_SIZE = 'background-size'
    BORDER = 'border'
    BORDER_COLOR = 'border-color'
    BORDER_RADIUS = 'border-radius'
    BORDER_STYLE = 'border-style'
    BORDER_WIDTH = 'border-width'
    BOTTOM = 'bottom'
    BOX_SHADOW = 'box-shadow'
    BOX_SIZING = 'box-sizing'
    COLOR = 'color'
    COLUMN_GAP = 'column-gap'
    CURSOR = 'cursor'
    DISPLAY = 'display'
    FILTER = 'filter'
    FLEX = 'flex'
    FLEX_DIRECTION = 'flex-direction'
    FLEX_WRAP = 'flex-wrap'
    FLOAT = 'float'
    FONT_FAMILY = 'font-family'
    FONT_SIZE = 'font-size'
    FONT_STYLE = 'font-style'
    FONT_WEIGHT = 'font-weight'
    GAP = 'gap'
    GRID_TEMPLATE_COLUMNS = 'grid-template-columns'
    GRID_TEMPLATE_ROWS = 'grid-template-rows'
    HEIGHT = 'height'
    JUSTIFY_CONTENT = 'justify-content'
    LEFT = 'left'
    LETTER_SPACING = 'letter-spacing'
    LINE_HEIGHT = 'line-height'
    LIST_STYLE = 'list-style'
    MARGIN = 'margin'
    MARGIN_BOTTOM = 'margin-bottom'
    MARGIN_LEFT = 'margin-left'
    MARGIN_RIGHT = 'margin-right'
    MARGIN_TOP = 'margin-top'
    MAX_HEIGHT = 'max-height'
    MAX_WIDTH = 'max-width'
    MIN_HEIGHT = 'min-height'
    MIN_WIDTH = 'min-width'
    OBJECT_FIT = 'object-fit'
    OPACITY = 'opacity'
    OUTLINE = 'outline'
    OVERFLOW = 'overflow'
    OVERFLOW_X = 'overflow-x'
    OVERFLOW_Y = 'overflow-y'
    PADDING = 'padding'
    PADDING_BOTTOM = 'padding-bottom'
    PADDING_LEFT = 'padding-left'
    PADDING_RIGHT = 'padding-right'
    PADDING_TOP = 'padding-top'
    POINTER_EVENTS = 'pointer-events'
    POSITION = 'position'
    RIGHT = 'right'
    ROW_GAP = 'row-gap'
    TEXT_ALIGN = 'text-align'
    TEXT_DECORATION = 'text-decoration'
    TEXT_OVERFLOW = 'text-overflow'
    TEXT_TRANSFORM = 'text-transform'
    TOP = 'top'
    TRANSFORM = 'transform'
    TRANSITION = 'transition'
    USER_SELECT = 'user-select'
    VERTICAL_ALIGN = 'vertical-align'
    VISIBILITY = 'visibility'
    WHITE_SPACE = 'white-space'
    WIDTH = 'width'
    WORD_BREAK = 'word-break'
    Z_INDEX = 'z-index'

    def __str__(self) -> str:
        return self.value


def kebab_case(name: Union[Property, str]) -> str:
    if isinstance(name, Property):
        return name.value
    name = _CAMEL_BOUNDARY.sub('-', str(name).strip())
    return name.replace('_', '-').lower()


class StyleDeclaration:
    __slots__ = ('property', 'value')

    def __init__(self, property: Union[Property, str], value: Any) -> None:
        property = kebab_case(property)
        if not property:
            raise ValueError('Style property cannot be empty')
        self.property = property
        self.value = str(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleDeclaration):
            return NotImplemented
        return (self.property, self.value) == (other.property, other.value)

    def __hash__(self) -> int:
        return hash((self.property, self.value))

    def __repr__(self) -> str:
        return f'StyleDeclaration({self.property!r}, {self.value!r})'

    def to_css(self) -> str:
        return f'{self.property}: {self.value}'


def render_declarations(declarations: Iterable[StyleDeclaration]) -> str:
    return '; '.join(
        d.to_css()
        for d in sorted(declarations, key=lambda d: d.property)
    )
