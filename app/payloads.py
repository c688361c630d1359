"""
Incoming webhook payloads.
"""
import json
import re
from dataclasses import dataclass

from config_loader import Config

SEVERITY_COLORS = ('good', 'warning', 'danger')
hex_color_pattern = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')

COLOR_HELP = (
    'Slack color can be either "good", "warning", "danger" '
    'or a web hexadecimal color, like "#fecc00" or "#ccc"'
)


class InvalidColorError(ValueError):
    pass


def validate_color(color: str) -> str:
    if color in SEVERITY_COLORS or hex_color_pattern.match(color):
        return color
    raise InvalidColorError(f'Invalid color: {color!r}')


@dataclass(frozen=True)
class Attachment:
    fallback: str
    text: str
    color: str | None = None

    def to_dict(self) -> dict:
        data = {'fallback': self.fallback, 'text': self.text}
        if self.color is not None:
            data['color'] = self.color
        return data


@dataclass(frozen=True)
class Payload:
    text: str
    channel: str | None = None
    username: str | None = None
    icon_url: str | None = None
    attachments: tuple[Attachment, ...] = ()

    def to_dict(self) -> dict:
        """Wire form. Unset fields are left out, not sent as null."""
        data = {'text': self.text}
        if self.channel is not None:
            data['channel'] = self.channel
        if self.username is not None:
            data['username'] = self.username
        if self.icon_url is not None:
            data['icon_url'] = self.icon_url
        if self.attachments:
            data['attachments'] = [a.to_dict() for a in self.attachments]
        return data


def build_attachment(text: str, color: str | None = None) -> Attachment:
    if color is not None:
        color = validate_color(color)
    return Attachment(fallback=text, text=text, color=color)


def build_payload(config: Config) -> Payload:
    color = config.attachment_color
    # Checked even without attachment text, so a bad color never
    # reaches the network.
    if color is not None:
        validate_color(color)

    return Payload(
        text=config.text,
        channel=config.channel,
        username=config.username,
        icon_url=config.user_icon_url,
        attachments=tuple(
            build_attachment(text, color) for text in config.attachments
        ),
    )


def serialize_payload(payload: Payload) -> bytes:
    return json.dumps(payload.to_dict(), ensure_ascii=False).encode('utf-8')
