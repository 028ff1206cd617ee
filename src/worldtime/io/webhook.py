"""Delivery of the rendered board to a chat webhook.

Without a message id the board is posted as a new message and the id of the
created message is returned, so it can be configured for later runs. With a
message id the existing message is edited in place.
"""
from typing import Optional
import logging
import time

import httpx

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 2000
RETRY_STATUSES = {429, 500, 502, 503, 504}


class DeliveryError(RuntimeError):
  """Webhook call failed or was refused."""

  def __init__(self, message: str, status_code: Optional[int] = None):
    super().__init__(message)
    self.status_code = status_code


class WebhookSink:

  def __init__(
    self,
    url: str,
    message_id: Optional[str] = None,
    timeout: float = 10.0,
    retries: int = 3,
    backoff: float = 1.0,
    client: Optional[httpx.Client] = None,
  ):
    if not url:
      raise ValueError("Webhook URL is required")
    self.url = url.rstrip("/")
    self.message_id = message_id
    self.retries = retries
    self.backoff = backoff
    self._owns_client = client is None
    self._client = client or httpx.Client(timeout=timeout)

  def deliver(self, content: str) -> str:
    """Create or update the board message. Returns the message id."""
    if len(content) > MAX_CONTENT_LENGTH:
      raise DeliveryError(f"Content is {len(content)} characters, limit is {MAX_CONTENT_LENGTH}")

    payload = {"content": content}
    if not self.message_id:
      resp = self._send("POST", self.url, params={"wait": "true"}, json=payload)
      try:
        message_id = str(resp.json()["id"])
      except (ValueError, KeyError, TypeError) as e:
        raise DeliveryError("Webhook POST returned no message id", status_code=resp.status_code) from e
      logger.info(f"Created message. Set DISCORD_MESSAGE_ID to: {message_id}")
      self.message_id = message_id
      return message_id

    self._send("PATCH", f"{self.url}/messages/{self.message_id}", json=payload)
    logger.info(f"Updated message {self.message_id}")
    return self.message_id

  def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
    attempt = 0
    while True:
      attempt += 1
      try:
        resp = self._client.request(method, url, **kwargs)
      except httpx.TransportError as e:
        if attempt > self.retries:
          raise DeliveryError(f"Webhook {method} failed: {e}") from e
        delay = self.backoff * 2 ** (attempt - 1)
        logger.warning(f"Webhook {method} transport error ({e}), retry {attempt}/{self.retries} in {delay:.1f}s")
        time.sleep(delay)
        continue

      if resp.is_success:
        return resp
      if resp.status_code not in RETRY_STATUSES or attempt > self.retries:
        raise DeliveryError(
          f"Webhook {method} failed: {resp.status_code} {resp.text}",
          status_code=resp.status_code,
        )
      delay = _retry_after(resp) or self.backoff * 2 ** (attempt - 1)
      logger.warning(f"Webhook {method} got {resp.status_code}, retry {attempt}/{self.retries} in {delay:.1f}s")
      time.sleep(delay)

  def close(self) -> None:
    # a client passed in by the caller stays open
    if self._owns_client:
      self._client.close()

  def __enter__(self):
    return self

  def __exit__(self, *exc):
    self.close()


def _retry_after(resp: httpx.Response) -> Optional[float]:
  raw = resp.headers.get("Retry-After")
  if raw is None:
    return None
  try:
    return max(0.0, float(raw))
  except ValueError:
    return None
