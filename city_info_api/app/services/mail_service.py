"""
Outgoing mail notifications.

Two implementations share the ``MailService`` interface:

* ``LocalMailService`` writes the mail to the log, which is all a
  developer machine needs;
* ``CloudMailService`` posts the mail as JSON to an HTTP mail API with
  ``requests``.

Sending is best effort.  Delivery problems are logged and never raised,
so a failing mail provider cannot fail the request that triggered the
notification.  ``get_mail_service`` selects the implementation from the
``MAIL_BACKEND`` setting.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import requests

from ..core.config import Settings

logger = logging.getLogger(__name__)


class MailService(ABC):
    """Interface for sending a notification mail."""

    def __init__(self, mail_to: str, mail_from: str):
        self.mail_to = mail_to
        self.mail_from = mail_from

    @abstractmethod
    def send(self, subject: str, message: str) -> None:
        """Send a mail with ``subject`` and body ``message``."""


class LocalMailService(MailService):
    """Mail service that only logs the mail it would have sent."""

    def send(self, subject: str, message: str) -> None:
        logger.info("Mail from %s to %s, with LocalMailService.", self.mail_from, self.mail_to)
        logger.info("Subject: %s", subject)
        logger.info("Message: %s", message)


class CloudMailService(MailService):
    """Mail service that delivers through an HTTP mail API.

    The API receives ``{"from", "to", "subject", "text"}`` as JSON.  If
    ``api_key`` is set it is sent as a bearer token.
    """

    def __init__(
        self,
        mail_to: str,
        mail_from: str,
        api_url: str,
        api_key: str = "",
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(mail_to, mail_from)
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, subject: str, message: str) -> None:
        if not self.api_url:
            logger.warning("No mail API URL configured, dropping mail '%s'", subject)
            return
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        payload = {
            "from": self.mail_from,
            "to": self.mail_to,
            "subject": subject,
            "text": message,
        }
        try:
            logger.debug("Posting mail '%s' to %s", subject, self.api_url)
            response = self.session.post(
                self.api_url,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Failed to send mail '%s' to %s: %s", subject, self.mail_to, exc)
            return
        logger.info("Mail from %s to %s, with CloudMailService.", self.mail_from, self.mail_to)


def get_mail_service(settings: Settings) -> MailService:
    """Build the mail service selected by ``settings.mail_backend``."""
    backend = settings.mail_backend.lower()
    if backend == "local":
        return LocalMailService(settings.mail_to_address, settings.mail_from_address)
    if backend == "cloud":
        return CloudMailService(
            settings.mail_to_address,
            settings.mail_from_address,
            api_url=settings.mail_api_url,
            api_key=settings.mail_api_key,
            timeout=settings.mail_timeout,
        )
    raise ValueError(f"Unknown mail backend '{settings.mail_backend}'")
