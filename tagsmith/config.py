from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import tomli

from .elements import HighlighterTheme

DEFAULT_CONFIG = {
    'base_path': '/',
    'highlighter_themes': [],
}


@dataclass(frozen=True)
class RenderContext:
    """Site settings passed explicitly to the attribute producers that need them."""

    base_path: str = '/'
    highlighter_themes: tuple[HighlighterTheme, ...] = ()


def get_config(path: Union[str, Path] = 'pyproject.toml', section='tool.tagsmith') -> dict:
    path = Path(path)
    config = {}
    if path.exists():
        with open(path, 'rb') as fp:
            config = tomli.load(fp)

    keys = list(section.split('.'))
    while keys:
        key = keys.pop(0)
        config = config.get(key, {})
        if not isinstance(config, dict):
            raise ValueError(f'Expected `{key}` to be a table in {path}')

    return {**DEFAULT_CONFIG, **config}


def load_context(path: Union[str, Path] = 'pyproject.toml') -> RenderContext:
    config = get_config(path)

    if not isinstance(config['highlighter_themes'], list):
        raise ValueError(f'Expected `highlighter_themes` to be a list in {path}')
    if not isinstance(config['base_path'], str):
        raise ValueError(f'Expected `base_path` to be a string in {path}')

    themes = []
    for name in config['highlighter_themes']:
        try:
            themes.append(HighlighterTheme(name))
        except ValueError:
            raise ValueError(f'Unknown highlighter theme "{name}" in {path}') from None

    return RenderContext(
        base_path=config['base_path'],
        highlighter_themes=tuple(themes),
    )
