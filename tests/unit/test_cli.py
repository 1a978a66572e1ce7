from click.testing import CliRunner

from tagsmith.cli import cli


def test_render():
    result = CliRunner().invoke(cli, [
        'render', 'div',
        '--class', 'foo', '--class', 'bar',
        '--attr', 'hidden', '--attr', 'id=main',
        '--data', 'Key=v',
        '--aria', 'label=Main',
        '--style', 'zIndex=1', '--style', 'color=red',
        '--alert', 'onclick=hi',
    ])
    assert result.exit_code == 0, result.output
    assert result.output == (
        '<div aria-label="Main" data-key="v" hidden id="main" onclick="alert(\'hi\')" '
        'style="color: red; z-index: 1" class="bar foo"></div>\n'
    )


def test_render_void():
    result = CliRunner().invoke(cli, ['render', 'widget', '--void', '--attr', 'open'])
    assert result.exit_code == 0, result.output
    assert result.output == '<widget open />\n'

    result = CliRunner().invoke(cli, ['render', 'img', '--attr', 'src=a.png'])
    assert result.output == '<img src="a.png" />\n'


def test_render_bad_pair():
    result = CliRunner().invoke(cli, ['render', 'div', '--data', 'foo'])
    assert result.exit_code == 2
    assert 'Expected NAME=VALUE' in result.output


def test_highlighter_links():
    result = CliRunner().invoke(cli, ['highlighter-links', 'twilight', 'github-dark', '--config', 'missing.toml'])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        '<link href="/css/prism-github-dark.css" rel="stylesheet" data-highlight-theme="github-dark" />',
        '<link href="/css/prism-twilight.css" rel="stylesheet" data-highlight-theme="twilight" />',
    ]


def test_highlighter_links_from_config(project_dir):
    project_dir({'base_path': '/site/', 'highlighter_themes': ['dracula']})
    result = CliRunner().invoke(cli, ['highlighter-links'])
    assert result.exit_code == 0, result.output
    assert result.output == '<link href="/site/css/prism-dracula.css" rel="stylesheet" data-highlight-theme="dracula" />\n'


def test_highlighter_links_bad_config(project_dir):
    project_dir({'highlighter_themes': ['neon']})
    result = CliRunner().invoke(cli, ['highlighter-links'])
    assert result.exit_code == 1
    assert 'Unknown highlighter theme' in result.output


def test_highlighter_links_bad_config_shape(project_dir):
    project_dir({'highlighter_themes': 'nord'})
    result = CliRunner().invoke(cli, ['highlighter-links'])
    assert result.exit_code == 1
    assert 'to be a list' in result.output
