from __future__ import annotations

from pathlib import Path

import click

from . import html
from .config import load_context
from .elements import HighlighterTheme, MetaLink
from .events import ShowAlert
from .style import StyleDeclaration


def parse_pair(ctx, param, values, required_value=True):
    pairs = []
    for value in values:
        key, sep, val = value.partition('=')
        if not key or (required_value and not sep):
            raise click.BadParameter(f'Expected NAME=VALUE, got "{value}"', ctx=ctx, param=param)
        pairs.append((key, val if sep else None))
    return pairs


def parse_attr(ctx, param, values):
    return parse_pair(ctx, param, values, required_value=False)


@click.group()
def cli():
    pass


@cli.command()
@click.argument('name')
@click.option('--class', 'classes', multiple=True, help='Add class token(s)')
@click.option('--attr', 'attrs', multiple=True, callback=parse_attr, help='Custom attribute NAME or NAME=VALUE')
@click.option('--aria', 'arias', multiple=True, callback=parse_pair, help='ARIA attribute NAME=VALUE')
@click.option('--data', 'data', multiple=True, callback=parse_pair, help='Data attribute KEY=VALUE')
@click.option('--style', 'styles', multiple=True, callback=parse_pair, help='Inline style PROPERTY=VALUE')
@click.option('--alert', 'alerts', multiple=True, callback=parse_pair, help='Show an alert on EVENT=MESSAGE')
@click.option('--void', default=False, is_flag=True, help='Render as a self-closing tag')
def render(name: str, classes, attrs, arias, data, styles, alerts, void: bool):
    try:
        tag_cls = html.tag(name)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint='NAME')
    if void and not issubclass(tag_cls, html.SingletonTag):
        tag_cls = type(name, (html.SingletonTag, ), {'tag_name': name})

    element = tag_cls().add_class(*classes)
    for key, value in attrs:
        element = element.custom_attribute(key, value)
    for key, value in arias:
        element = element.aria(key, value)
    for key, value in data:
        element = element.data(key, value)
    if styles:
        element = element.style(*(StyleDeclaration(key, value) for key, value in styles))
    for event, message in alerts:
        element = element.add_event(event, [ShowAlert(message)])

    click.echo(element.to_html())


@cli.command('highlighter-links')
@click.argument('themes', nargs=-1, type=click.Choice([t.value for t in HighlighterTheme]))
@click.option('--config', 'config_path', default='pyproject.toml', type=click.Path(path_type=Path), help='Project configuration file')
def highlighter_links(themes, config_path: Path):
    try:
        context = load_context(config_path)
    except ValueError as exc:
        raise click.ClickException(str(exc))
    themes = [HighlighterTheme(t) for t in themes] or context.highlighter_themes
    for link in MetaLink.highlighter_theme_links(themes, context):
        click.echo(link.to_html())
