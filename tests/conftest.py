import logging
import os
from unittest import mock

import pytest
import requests

from pastes_cli.config import Config
from testing import make_response


@pytest.fixture
def config():
    return Config(content_type=None, user_agent='test-agent/1.0', headers={})


@pytest.fixture
def config_home(tmpdir):
    """Point the default config location at a temporary directory."""
    with mock.patch.dict(os.environ, {'XDG_CONFIG_HOME': tmpdir.strpath}):
        yield tmpdir


@pytest.fixture
def mock_send():
    with mock.patch.object(
            requests.Session,
            'send',
            autospec=True,
            return_value=make_response({'key': 'abcXYZ'}),
    ) as m:
        yield m


@pytest.fixture(autouse=True)
def reset_logging():
    """main() attaches a handler to the stderr of whichever test ran it."""
    yield
    logger = logging.getLogger('pastes_cli')
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
