from . import html
from .attributes import AriaAttribute, AttributeCollection, AttributeEntry, BooleanAttribute
from .config import RenderContext, load_context
from .elements import Button, ButtonType, HighlighterTheme, MetaLink, Role, TextField, TextFieldType
from .events import CustomAction, Event, HideElement, ShowAlert, ShowElement, ToggleElement
from .style import Property, StyleDeclaration
