#!/usr/bin/env python3
"""
Send a message to a Slack channel using an incoming webhook.

Environment variables are read from the environment, enriched by a .env
file found in the current directory or one of its parents.
"""
import argparse
import sys

from config_loader import ConfigError, resolve_config, resolve_environment
from logger import logger, set_verbose
from message_utils import WebhookError, send_slack_message
from payloads import COLOR_HELP, InvalidColorError, build_payload

__version__ = '0.1.0'


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # Every failure exits with 1, argument errors included.
        self.print_usage(sys.stderr)
        self.exit(1, f'{self.prog}: error: {message}\n')


def build_parser():
    parser = ArgumentParser(
        prog='swook',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-u', '--webhook-url',
        help='Webhook url, if not present it is read from '
        'SWOOK_WEBHOOK_URL environment variable',
    )
    parser.add_argument(
        '-c', '--channel',
        help='Channel to publish to, if not present it is read from '
        'SWOOK_CHANNEL environment variable. If omitted, the message is '
        'published to the default webhook channel',
    )
    parser.add_argument('-n', '--username', help='The username (optional)')
    parser.add_argument(
        '-i', '--user-icon-url', help='The user icon url (optional)'
    )
    parser.add_argument(
        '--attachment',
        action='append',
        default=[],
        help='The text of an attachment (optional, repeatable)',
    )
    parser.add_argument(
        '--attachment-color',
        help='The color of the attachment '
        '(valid only if a text has been specified)',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Log debug output'
    )
    parser.add_argument(
        '-V', '--version', action='version', version=f'%(prog)s {__version__}'
    )
    parser.add_argument('text', help='The text of the message to publish')
    return parser


def main(argv=None, *, environ=None, session=None) -> int:
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    env = resolve_environment(environ)
    try:
        config = resolve_config(args, env)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        payload = build_payload(config)
    except InvalidColorError as e:
        print(f'Unable to parse color: {e}', file=sys.stderr)
        print(COLOR_HELP, file=sys.stderr)
        return 1

    try:
        send_slack_message(
            webhook_url=config.webhook_url,
            payload=payload,
            session=session,
        )
    except WebhookError as e:
        print(f'Unable to notify slack channel: {e}', file=sys.stderr)
        return 1

    logger.debug('Message sent.')
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
