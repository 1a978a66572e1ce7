import os

from contextlib import contextmanager

import pytest
import tomli_w


@contextmanager
def chdir(path):
    old_cwd = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(old_cwd)


@pytest.fixture
def project_dir(tmp_path):
    def _project(tool=None):
        pyproject = {'project': {'name': 'site'}}
        if tool is not None:
            pyproject['tool'] = {'tagsmith': tool}
        (tmp_path / 'pyproject.toml').write_text(tomli_w.dumps(pyproject))
        return tmp_path

    with chdir(tmp_path):
        yield _project
