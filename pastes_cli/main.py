#!/usr/bin/env python3
"""Upload files or text to pastes.dev or bytebin.

To install the cli, run `pip install pastes-cli`.
"""
import argparse
import logging
import sys

from pastes_cli import __version__
from pastes_cli.config import get_config
from pastes_cli.errors import InputReadError
from pastes_cli.errors import PastesError
from pastes_cli.services import Service
from pastes_cli.upload import format_result
from pastes_cli.upload import upload
from pastes_cli.upload import UploadInput
from pastes_cli.upload import UploadOptions

DESCRIPTION = '''\
pastes uploads a file (or whatever is piped to it) to https://pastes.dev or
https://bytebin.lucko.me and prints a link to it.

Text files (and JSON or JavaScript) go to pastes.dev, everything else goes to
bytebin. Use --pastes or --bytebin to choose for yourself.

It works nicely in pipelines, so `cat my_file.txt | pastes` does the same
as `pastes my_file.txt`. In scripts, try the --json flag with jq:

    echo "hello" | pastes --json | jq -r .key

Defaults are read from a JSON config file, by default
~/.config/pastes/config.json, which is created on first use:

    {"content-type": "text/plain", "user-agent": "...", "headers": {}}
'''

logger = logging.getLogger('pastes_cli')


def bold(text):
    if sys.stdout.isatty():
        return '\033[1m{}\033[0m'.format(text)
    else:
        return text


def setup_logging(verbose):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))
    # replace rather than add, main() may run more than once per process
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def read_input(path):
    if path is None or path == '-':
        try:
            data = sys.stdin.buffer.read()
        except OSError as ex:
            raise InputReadError('Unable to read from STDIN: {}'.format(ex)) from ex
        logger.debug('Read %d bytes from STDIN', len(data))
        return UploadInput(data=data, source_name=None)
    else:
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as ex:
            raise InputReadError('Invalid file path: {}'.format(ex)) from ex
        logger.debug('Read %d bytes from %s', len(data), path)
        return UploadInput(data=data, source_name=path)


class PastesArgFormatter(
        argparse.ArgumentDefaultsHelpFormatter,
        argparse.RawDescriptionHelpFormatter,
):
    pass


def make_parser():
    parser = argparse.ArgumentParser(
        prog='pastes',
        description=DESCRIPTION,
        formatter_class=PastesArgFormatter,
    )
    parser.add_argument('--version', action='version', version='%(prog)s {}'.format(__version__))
    dest = parser.add_mutually_exclusive_group()
    dest.add_argument(
        '-b', '--bytebin', dest='service', action='store_const', const=Service.BYTEBIN,
        help='force the upload to go to bytebin.lucko.me',
    )
    dest.add_argument(
        '-p', '--pastes', dest='service', action='store_const', const=Service.PASTES,
        help='force the upload to go to pastes.dev',
    )
    parser.add_argument(
        '-t', '--content-type', type=str,
        help='Content-Type to send instead of guessing from the file extension',
    )
    parser.add_argument('-u', '--user-agent', type=str, help='User-Agent to send, overrides the config file')
    parser.add_argument('-c', '--config', type=str, help='path to the config file')
    parser.add_argument('-v', '--verbose', action='store_true', help='print what is going on to stderr')
    parser.add_argument('-j', '--json', action='store_true', help='print the result as JSON')
    parser.add_argument('file', type=str, nargs='?', help='path to file to upload (default: stdin)')
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = get_config(args.config)
        upload_input = read_input(args.file)
        result = upload(
            upload_input,
            UploadOptions(
                content_type=args.content_type,
                service=args.service,
                user_agent=args.user_agent,
            ),
            config,
        )
    except PastesError as ex:
        print(bold(str(ex)), file=sys.stderr)
        return 1

    if args.json:
        print(format_result(result, as_json=True))
    else:
        print(bold(format_result(result)))
    return 0


if __name__ == '__main__':
    exit(main())
