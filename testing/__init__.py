import json

import requests


PLAINTEXT_TESTCASES = (
    '',
    '\t\t\t',
    '    ',
    'hello world',
    'éóñəå  ⊂(◉‿◉)つ(ノ≥∇≤)ノ',
    'hello\nworld\n',
)

BINARY_TESTCASES = (
    b'hello world\00',
    b'\x43\x92\xd9\x0f\xaf\x32\x2c\x00\x12\x23',
    b'\x11\x22\x33\x44\x55',
)

FILE_CONTENT_TESTCASES = tuple(
    content.encode('utf8')
    for content in PLAINTEXT_TESTCASES
) + BINARY_TESTCASES

# compresses very well
REPETITIVE_LOG = b''.join(
    '2024-01-01 00:00:{:02d} INFO request handled in 3ms\n'.format(i % 60).encode('ascii')
    for i in range(1000)
)


def make_response(body, status_code=201):
    """Return a requests.Response as if the api replied with `body`."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode('utf8')

    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = 'utf-8'
    return response


def sent_request(mock_send):
    """Return the PreparedRequest passed to a mocked Session.send."""
    (_, prepared), _ = mock_send.call_args
    return prepared
