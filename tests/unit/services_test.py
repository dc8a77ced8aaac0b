import pytest

from pastes_cli.content_type import parse_content_type
from pastes_cli.content_type import resolve_content_type
from pastes_cli.services import BYTEBIN
from pastes_cli.services import choose_service
from pastes_cli.services import PASTES
from pastes_cli.services import Service
from pastes_cli.services import SERVICE_TARGETS


@pytest.mark.parametrize(
    ('content_type', 'expected'), [
        ('text/plain', PASTES),
        ('text/html', PASTES),
        ('text/x-python', PASTES),
        ('text/plain; charset=utf-8', PASTES),
        ('application/json', PASTES),
        ('application/javascript', PASTES),
        ('application/octet-stream', BYTEBIN),
        ('application/jsonx', BYTEBIN),
        ('application/pdf', BYTEBIN),
        ('image/png', BYTEBIN),
        ('foo/bar', BYTEBIN),
    ],
)
def test_choose_service_by_content_type(content_type, expected):
    assert choose_service(None, parse_content_type(content_type)) is expected


@pytest.mark.parametrize('content_type', ('text/plain', 'image/png', 'application/json'))
@pytest.mark.parametrize('service', tuple(Service))
def test_override_always_wins(content_type, service):
    target = choose_service(service, parse_content_type(content_type))
    assert target.service is service


def test_png_forced_to_pastes():
    assert choose_service(Service.PASTES, parse_content_type('image/png')) is PASTES


def test_service_targets():
    assert SERVICE_TARGETS[Service.PASTES].post_url == 'https://api.pastes.dev/post'
    assert SERVICE_TARGETS[Service.PASTES].view_url == 'https://pastes.dev/'
    assert SERVICE_TARGETS[Service.BYTEBIN].post_url == 'https://bytebin.lucko.me/post'
    assert SERVICE_TARGETS[Service.BYTEBIN].view_url == 'https://bytebin.lucko.me/'


def test_service_targets_read_only():
    with pytest.raises(TypeError):
        SERVICE_TARGETS[Service.PASTES] = BYTEBIN


@pytest.mark.parametrize('source_name', ('backup.gz', 'backup.tar.gz', 'logs.bz2', 'dump.xz'))
def test_compressed_files_go_to_bytebin(source_name):
    content_type = resolve_content_type(None, source_name, None)
    assert choose_service(None, content_type) is BYTEBIN
