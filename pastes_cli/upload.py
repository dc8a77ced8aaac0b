"""Building the upload request, sending it, and making sense of the reply."""
import json
import logging
from collections import namedtuple

import requests

from pastes_cli.compression import compress
from pastes_cli.config import DEFAULT_USER_AGENT
from pastes_cli.content_type import resolve_content_type
from pastes_cli.errors import HeaderError
from pastes_cli.errors import ResponseError
from pastes_cli.errors import TransportError
from pastes_cli.services import choose_service


logger = logging.getLogger(__name__)

# Headers we always set ourselves; the config file can't override these.
RESERVED_HEADERS = frozenset(('content-type', 'user-agent', 'content-encoding'))


UploadInput = namedtuple('UploadInput', ('data', 'source_name'))

UploadOptions = namedtuple(
    'UploadOptions',
    ('content_type', 'service', 'user_agent'),
    defaults=(None, None, None),
)


class UploadResult(namedtuple('UploadResult', ('key', 'service', 'url', 'zipped'))):

    def as_json(self):
        return {
            'key': self.key,
            'service': self.service.value,
            'url': self.url,
            'zipped': self.zipped,
        }


def build_headers(content_type, user_agent, was_compressed, extra_headers=None):
    headers = {
        'content-type': content_type.essence,
        'user-agent': user_agent,
    }
    if was_compressed:
        headers['content-encoding'] = 'gzip'

    for name, value in (extra_headers or {}).items():
        if name.lower() in RESERVED_HEADERS:
            logger.debug('Ignoring configured header %r, it is set automatically', name)
        else:
            headers[name] = value

    for name, value in headers.items():
        try:
            value.encode('latin-1')
        except UnicodeEncodeError as ex:
            raise HeaderError(
                'Header "{}" can only contain latin-1 characters: {!r}'.format(name, value),
            ) from ex
    return headers


def build_request(target, content_type, compression, user_agent, extra_headers=None):
    return requests.Request(
        'POST',
        target.post_url,
        data=compression.payload,
        headers=build_headers(content_type, user_agent, compression.was_compressed, extra_headers),
    )


def send_request(request):
    logger.debug('Uploading %d bytes to %s...', len(request.data), request.url)
    try:
        with requests.Session() as session:
            return session.send(request.prepare(), allow_redirects=False)
    except requests.exceptions.RequestException as ex:
        raise TransportError('Error contacting api: {}'.format(ex)) from ex


def interpret_response(response, target, compression):
    try:
        j = response.json()
    except ValueError as ex:
        raise ResponseError(
            'Unable to parse json response from api',
            status_code=response.status_code,
            body=response.text,
        ) from ex

    if not isinstance(j, dict) or not isinstance(j.get('key'), str):
        raise ResponseError(
            'Expected a "key" in the json response from api',
            status_code=response.status_code,
            body=response.text,
        )

    key = j['key']
    return UploadResult(
        key=key,
        service=target.service,
        url=target.view_url + key,
        zipped=compression.was_compressed,
    )


def format_result(result, as_json=False):
    if as_json:
        return json.dumps(result.as_json())
    else:
        return 'File uploaded to {}'.format(result.url)


def upload(upload_input, options, config):
    """Upload a single input and return the UploadResult."""
    content_type = resolve_content_type(
        options.content_type,
        upload_input.source_name,
        config.content_type,
    )
    target = choose_service(options.service, content_type)
    compression = compress(upload_input.data)
    request = build_request(
        target,
        content_type,
        compression,
        options.user_agent or config.user_agent or DEFAULT_USER_AGENT,
        config.headers,
    )
    response = send_request(request)
    return interpret_response(response, target, compression)
