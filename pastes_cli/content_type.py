"""Working out which content type to declare for an upload."""
import logging
import mimetypes
import re
from collections import namedtuple

from pastes_cli.errors import ContentTypeError


logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = 'text/plain'

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_QUOTED_STRING = r'"(?:[^"\\]|\\.)*"'

ESSENCE_RE = re.compile(r'\s*({token})/({token})\s*'.format(token=_TOKEN))
PARAM_RE = re.compile(
    r';\s*({token})=({token}|{quoted})\s*'.format(token=_TOKEN, quoted=_QUOTED_STRING),
)


class ContentType(namedtuple('ContentType', ('type', 'subtype', 'params'))):

    @property
    def essence(self):
        return '{}/{}'.format(self.type, self.subtype)

    def __str__(self):
        return '; '.join(
            (self.essence,) + tuple('{}={}'.format(name, value) for name, value in self.params),
        )


TEXT_PLAIN = ContentType('text', 'plain', ())


def parse_content_type(value):
    """Parse a `type/subtype[; name=value ...]` string.

    Only the syntax is checked. Unregistered types like `foo/bar` are fine,
    since whoever asked for them presumably knows what they want.
    """
    match = ESSENCE_RE.match(value)
    if not match:
        raise ContentTypeError('Invalid content type: {!r}'.format(value))

    parsed_params = []
    pos = match.end()
    while pos < len(value):
        param_match = PARAM_RE.match(value, pos)
        if not param_match:
            raise ContentTypeError(
                'Invalid parameter {!r} in content type: {!r}'.format(value[pos:].strip(), value),
            )
        name, param_value = param_match.groups()
        parsed_params.append((name.lower(), param_value))
        pos = param_match.end()

    return ContentType(
        type=match.group(1).lower(),
        subtype=match.group(2).lower(),
        params=tuple(parsed_params),
    )


# Content types for the compression formats mimetypes reports as an encoding
# rather than a type (it gives `.tar.gz` as application/x-tar + gzip).
ENCODING_CONTENT_TYPES = {
    'gzip': 'application/gzip',
    'bzip2': 'application/x-bzip2',
    'xz': 'application/x-xz',
    'br': 'application/x-brotli',
    'compress': 'application/x-compress',
}


def guess_content_type(source_name):
    """Guess a content type from a file name's extension, or return None.

    Compressed files are labelled by their compression format.
    """
    mimetype, encoding = mimetypes.guess_type(source_name)
    if encoding is not None:
        return ENCODING_CONTENT_TYPES.get(encoding, 'application/octet-stream')
    return mimetype


def resolve_content_type(explicit, source_name, configured_default=None):
    if explicit is not None:
        try:
            return parse_content_type(explicit)
        except ContentTypeError as ex:
            raise ContentTypeError('Unable to parse provided content type: {}'.format(ex)) from ex

    if source_name is None:
        logger.debug("Content type not specified when using STDIN, so using '%s'", TEXT_PLAIN.essence)
        return TEXT_PLAIN

    guessed = guess_content_type(source_name)
    if guessed is not None:
        logger.debug('Using content type %s from file extension.', guessed)
        return parse_content_type(guessed)

    default = configured_default or DEFAULT_CONTENT_TYPE
    logger.debug("Unable to guess content type from file extension, using '%s'.", default)
    try:
        return parse_content_type(default)
    except ContentTypeError as ex:
        raise ContentTypeError(
            'Unable to parse content type from configuration: {}'.format(ex),
        ) from ex
