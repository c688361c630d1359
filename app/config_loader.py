"""
Configuration for swook.

Values come from command line flags first, then from SWOOK_* environment
variables. A .env file found in the current directory or one of its
parents supplies environment values that are not already set.
"""
import os
from dataclasses import dataclass

from dotenv import dotenv_values, find_dotenv
from logger import logger

ENV_PREFIX = 'SWOOK_'
ENV_NAMES = ('WEBHOOK_URL', 'CHANNEL')


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Config:
    webhook_url: str
    text: str
    channel: str | None = None
    username: str | None = None
    user_icon_url: str | None = None
    attachments: tuple[str, ...] = ()
    attachment_color: str | None = None


def env_key(name):
    return f'{ENV_PREFIX}{name}'


def find_env_file():
    # Walks up from the current working directory. '' when not found.
    return find_dotenv(usecwd=True)


def load_env_file(path=None) -> dict[str, str]:
    """
    Read a .env file into a plain dict without touching os.environ.
    A missing or unreadable file yields an empty dict.
    """
    if path is None:
        path = find_env_file()
    if not path:
        logger.debug('No .env file found.')
        return {}
    try:
        values = dotenv_values(path, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f'Unable to read {path}: {e.__class__.__name__}:{e}')
        return {}
    logger.debug(f'Loaded .env file: {path}')
    # `KEY` lines without `=` come back as None.
    return {k: v for k, v in values.items() if v is not None}


def resolve_environment(environ=None, env_file_values=None) -> dict[str, str]:
    """
    Merge .env values with the real environment (real environment wins)
    and keep only the recognized SWOOK_* names.
    """
    if environ is None:
        environ = os.environ
    if env_file_values is None:
        env_file_values = load_env_file()

    merged = {}
    for name in ENV_NAMES:
        key = env_key(name)
        if key in environ:
            merged[key] = environ[key]
        elif key in env_file_values:
            merged[key] = env_file_values[key]
    return merged


def resolve_config(args, env: dict[str, str]) -> Config:
    """
    Build the Config from parsed arguments and the resolved environment.
    Raises ConfigError if no webhook url is available.
    """
    webhook_url = args.webhook_url or env.get(env_key('WEBHOOK_URL'))
    if not webhook_url:
        raise ConfigError('No webhook url provided!')
    channel = args.channel or env.get(env_key('CHANNEL')) or None

    return Config(
        webhook_url=webhook_url,
        text=args.text,
        channel=channel,
        username=args.username or None,
        user_icon_url=args.user_icon_url or None,
        attachments=tuple(args.attachment or ()),
        attachment_color=args.attachment_color or None,
    )
