from urllib.parse import urlparse

import requests
from logger import logger
from payloads import Payload, serialize_payload


class WebhookError(Exception):
    pass


class InvalidWebhookURLError(WebhookError):
    pass


class DeliveryError(WebhookError):
    pass


def parse_webhook_url(webhook_url: str) -> str:
    """Check that the webhook url is an absolute http(s) url."""
    try:
        parsed = urlparse(webhook_url)
    except ValueError as e:
        raise InvalidWebhookURLError(f'{webhook_url}: {e}') from e
    if parsed.scheme not in ('http', 'https'):
        raise InvalidWebhookURLError(
            f'{webhook_url}: url must start with http:// or https://'
        )
    if not parsed.hostname:
        raise InvalidWebhookURLError(f'{webhook_url}: url has no host')
    if any(c.isspace() for c in parsed.netloc):
        raise InvalidWebhookURLError(f'{webhook_url}: invalid host')
    try:
        parsed.port
        requests.Request('POST', webhook_url).prepare()
    except (ValueError, requests.RequestException) as e:
        raise InvalidWebhookURLError(f'{webhook_url}: {e}') from e
    return webhook_url


def send_slack_message(
    *,
    webhook_url: str,
    payload: Payload,
    session: requests.Session | None = None,
) -> requests.Response:
    """
    Post the payload to the webhook. One attempt, no retries.
    Raises DeliveryError on transport failure or a non-2xx response.
    """
    webhook_url = parse_webhook_url(webhook_url)
    body = serialize_payload(payload)

    own_session = session is None
    if own_session:
        session = requests.Session()
    try:
        logger.debug(f'Posting {len(body)} bytes to {urlparse(webhook_url).hostname}')
        response = session.post(
            webhook_url,
            data=body,
            headers={'Content-Type': 'application/json'},
        )
    except requests.RequestException as e:
        raise DeliveryError(f'{e.__class__.__name__}: {e}') from e
    finally:
        if own_session:
            session.close()

    logger.debug(f'Webhook response: {response.status_code} {response.text!r}')
    if not 200 <= response.status_code < 300:
        raise DeliveryError(
            f'HTTP {response.status_code}: {response.text or response.reason}'
        )
    return response
