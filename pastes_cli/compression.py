import gzip
import logging
import zlib
from collections import namedtuple


logger = logging.getLogger(__name__)

# zlib's own default; gzip.compress would otherwise use 9
COMPRESS_LEVEL = 6


CompressionOutcome = namedtuple('CompressionOutcome', ('payload', 'was_compressed'))


def compress(data):
    """Gzip the payload, but only keep the result if it is actually smaller.

    Small or already-compressed inputs usually grow when gzipped, and a
    failure to compress just means we send the original bytes.
    """
    logger.debug('Zipping data...')
    try:
        zipped = gzip.compress(data, compresslevel=COMPRESS_LEVEL)
    except (OSError, ValueError, zlib.error) as ex:
        logger.debug('Unable to zip data: %s', ex)
        return CompressionOutcome(payload=data, was_compressed=False)

    logger.debug('Zipped %d bytes into %d bytes', len(data), len(zipped))
    if len(zipped) >= len(data):
        logger.debug('Since the zipped data was not smaller than unzipped, sending unzipped data.')
        return CompressionOutcome(payload=data, was_compressed=False)
    else:
        return CompressionOutcome(payload=zipped, was_compressed=True)
