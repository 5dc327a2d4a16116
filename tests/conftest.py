### stdlib
from pathlib import Path
import os
from unittest import mock

# third party imports
import pytest

from ghorg import session


# scope: function, class, module, or session
# autouse: boolean.  Apply to all instances of the given scope.
@pytest.fixture(scope='function', autouse=True)
def isolated_config(request, tmpdir, monkeypatch):
    base_path = Path(str(tmpdir.mkdir('ghorg_base')))
    config_path = base_path / 'config.yml'

    mockers = [
        mock.patch('ghorg.util.BASE_DIR', str(base_path)),
        mock.patch('ghorg.util.BASE_PATH', base_path),
        mock.patch('ghorg.util.CONFIG_PATH', config_path),
        mock.patch('ghorg.api.CONFIG_PATH', config_path),
        ]
    for mocker in mockers:
        mocker.start()

    # a token in the environment would leak into request headers
    monkeypatch.delenv(session.TOKEN_ENV_VAR, raising=False)
    session.clear_session()

    def teardown():
        for mocker in mockers:
            mocker.stop()
        session.clear_session()

    request.addfinalizer(teardown)
    return config_path


@pytest.fixture(scope='function', autouse=True)
def set_temporary_working_dir(request, tmpdir):
    orig_dir = os.getcwd()
    os.chdir(str(tmpdir))

    def teardown():
        os.chdir(orig_dir)

    request.addfinalizer(teardown)
