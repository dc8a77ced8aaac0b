"""Loading the JSON config file.

The config file looks like:

    {
        "content-type": "text/plain",
        "user-agent": "my-script/1.0",
        "headers": {"X-Example": "value"}
    }

All keys are optional. "content-type" is only used when the type can't be
guessed from the file extension.
"""
import json
import logging
import os.path
import sys
from collections import namedtuple

from pastes_cli import __version__
from pastes_cli.errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'pastes-cli/{}'.format(__version__)

DEFAULT_CONFIG = {
    'content-type': 'text/plain',
    'user-agent': DEFAULT_USER_AGENT,
    'headers': {},
}


Config = namedtuple('Config', ('content_type', 'user_agent', 'headers'))


def default_config_path():
    config_home = os.environ.get('XDG_CONFIG_HOME') or os.path.expanduser('~/.config')
    return os.path.join(config_home, 'pastes', 'config.json')


def init_default_config(path):
    """Write the default config to `path` unless something is already there.

    Returns True if the file was created.
    """
    if os.path.exists(path):
        return False

    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(DEFAULT_CONFIG, f, indent=4)
            f.write('\n')
    except OSError as ex:
        raise ConfigError('Error when writing config to {}: {}'.format(path, ex)) from ex
    return True


def _check_type(j, key, expected_type, type_name):
    value = j.get(key)
    if value is not None and not isinstance(value, expected_type):
        raise ConfigError(
            'Expected "{}" to be {}, but it was type "{}" instead.'.format(
                key, type_name, type(value).__name__,
            ),
        )
    return value


def parse_config(j):
    if not isinstance(j, dict):
        raise ConfigError(
            'Expected to parse dict, but the JSON was type "{}" instead.'.format(type(j).__name__),
        )

    content_type = _check_type(j, 'content-type', str, 'a string')
    user_agent = _check_type(j, 'user-agent', str, 'a string')
    headers = _check_type(j, 'headers', dict, 'an object') or {}
    for name, value in headers.items():
        if not isinstance(value, str):
            raise ConfigError('Expected header "{}" to have a string value.'.format(name))

    return Config(
        content_type=content_type,
        user_agent=user_agent or DEFAULT_USER_AGENT,
        headers=dict(headers),
    )


def get_config(path=None):
    """Load the config from `path`, or from the default location.

    The default config file is created on first use.
    """
    if path is None:
        path = default_config_path()
        if init_default_config(path):
            print('Created config at {}'.format(path), file=sys.stderr)

    try:
        with open(path) as f:
            j = json.load(f)
    except OSError as ex:
        raise ConfigError('Unable to read from config file "{}": {}'.format(path, ex)) from ex
    except ValueError as ex:
        raise ConfigError('Error parsing config file "{}". Is it valid JSON? ({})'.format(path, ex)) from ex

    logger.debug('Loaded config from %s', path)
    return parse_config(j)
