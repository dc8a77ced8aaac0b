"""The two paste services we can upload to, and how we pick between them."""
import enum
import types
from collections import namedtuple


class Service(enum.Enum):
    BYTEBIN = 'Bytebin'
    PASTES = 'Pastes'


ServiceTarget = namedtuple('ServiceTarget', ('service', 'post_url', 'view_url'))


BYTEBIN = ServiceTarget(
    service=Service.BYTEBIN,
    post_url='https://bytebin.lucko.me/post',
    view_url='https://bytebin.lucko.me/',
)

PASTES = ServiceTarget(
    service=Service.PASTES,
    post_url='https://api.pastes.dev/post',
    view_url='https://pastes.dev/',
)

SERVICE_TARGETS = types.MappingProxyType({
    Service.BYTEBIN: BYTEBIN,
    Service.PASTES: PASTES,
})


# Content types which go to pastes.dev. Type-wide entries end with a slash.
PASTES_CONTENT_TYPES = (
    'text/',
    'application/javascript',
    'application/json',
)


def is_paste_content_type(content_type):
    essence = content_type.essence
    return any(
        essence.startswith(prefix) if prefix.endswith('/') else essence == prefix
        for prefix in PASTES_CONTENT_TYPES
    )


def choose_service(override, content_type):
    """Return the ServiceTarget to upload to.

    An explicit override always wins; otherwise text-ish content goes to
    pastes.dev and everything else goes to bytebin.
    """
    if override is not None:
        return SERVICE_TARGETS[override]
    elif is_paste_content_type(content_type):
        return PASTES
    else:
        return BYTEBIN
