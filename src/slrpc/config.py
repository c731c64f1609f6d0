""" Resolution of connection settings.

    Settings are layered: built-in defaults first, then the INI-style
    configuration file (``~/.softlayer`` unless ``SL_CONFIG_FILE`` names
    another one), then environment variables. Later layers win.

    The configuration file uses a single ``[softlayer]`` section::

        [softlayer]
        username = someone
        api_key = 0123456789abcdef
        endpoint_url = https://api.softlayer.com/xmlrpc/v3.1
        timeout = 30
        debug = false
"""

import configparser
import os
from dataclasses import dataclass

from .transport.base import DEFAULT_TIMEOUT


DEFAULT_ENDPOINT = 'https://api.softlayer.com/xmlrpc/v3.1'
SECTION = 'softlayer'

directory = os.path.expanduser('~')
default_file = os.path.join(directory, '.softlayer')

# Environment variable for each setting.

environment = {
    'username': 'SL_USERNAME',
    'api_key': 'SL_API_KEY',
    'endpoint_url': 'SL_ENDPOINT_URL',
    'timeout': 'SL_TIMEOUT',
    'debug': 'SL_DEBUG',
}

_true = set(('1', 'true', 'yes', 'on'))
_false = set(('0', 'false', 'no', 'off', ''))


@dataclass(frozen=True)
class Settings:
    username: str = ''
    api_key: str = ''
    endpoint_url: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False


def load(path=None, environ=None):
    """ Return a :class:`Settings` instance. *path* overrides the location
        of the configuration file; a missing file is not an error. *environ*
        defaults to :data:`os.environ`. A malformed timeout or debug value
        raises ValueError.
    """

    if environ is None:
        environ = os.environ

    if path is None:
        path = environ.get('SL_CONFIG_FILE', default_file)

    raw = dict()
    raw.update(read_file(path))

    for setting, variable in environment.items():
        try:
            raw[setting] = environ[variable]
        except KeyError:
            pass

    kwargs = dict()

    for setting in ('username', 'api_key', 'endpoint_url'):
        if setting in raw:
            kwargs[setting] = raw[setting]

    if 'timeout' in raw:
        kwargs['timeout'] = _parse_timeout(raw['timeout'])

    if 'debug' in raw:
        kwargs['debug'] = _parse_bool('debug', raw['debug'])

    return Settings(**kwargs)


def read_file(path) -> dict:
    """ Return the raw string values found in the ``[softlayer]`` section of
        the file at *path*, or an empty dictionary if the file or section is
        not present.
    """

    parser = configparser.ConfigParser(interpolation=None)

    if not parser.read(path):
        return dict()

    if not parser.has_section(SECTION):
        return dict()

    values = dict()
    for setting in environment.keys():
        if parser.has_option(SECTION, setting):
            values[setting] = parser.get(SECTION, setting)

    return values


def _parse_timeout(value) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError('timeout must be a number of seconds: ' + repr(value))

    if timeout < 0:
        raise ValueError('timeout must not be negative: ' + repr(value))

    return timeout


def _parse_bool(setting, value) -> bool:
    lowered = str(value).strip().lower()

    if lowered in _true:
        return True
    if lowered in _false:
        return False

    raise ValueError(setting + ' must be a boolean: ' + repr(value))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
