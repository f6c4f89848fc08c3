"""Delivery of admin account emails through Brevo's transactional API."""

import logging
from dataclasses import dataclass

import sib_api_v3_sdk
from sib_api_v3_sdk.rest import ApiException

from cms_admin.config import settings
from cms_admin.mail.credentials import BuiltEmail, build_credentials_email

logger = logging.getLogger(__name__)


@dataclass
class EmailResult:
    success: bool
    message_id: str | None = None
    error: str | None = None


def transactional_api(api_key: str | None = None) -> sib_api_v3_sdk.TransactionalEmailsApi:
    config = sib_api_v3_sdk.Configuration()
    config.api_key["api-key"] = api_key or settings.brevo_api_key
    return sib_api_v3_sdk.TransactionalEmailsApi(sib_api_v3_sdk.ApiClient(config))


class BrevoClient:
    """Sends rendered ``BuiltEmail`` messages from the configured admin sender."""

    def __init__(self, api_key: str | None = None, api=None):
        self._api = api or transactional_api(api_key)
        self._sender = {"email": settings.brevo_sender_email, "name": settings.brevo_sender_name}

    def deliver(self, message: BuiltEmail) -> EmailResult:
        smtp_email = sib_api_v3_sdk.SendSmtpEmail(
            sender=self._sender,
            to=[{"email": message.to_email, "name": message.to_name}],
            subject=message.subject,
            html_content=message.html_content,
            tags=message.tags,
        )
        try:
            response = self._api.send_transac_email(smtp_email)
        except ApiException as e:
            logger.error(f"Brevo rejected email to {message.to_email}: {e.status} {e.reason}")
            return EmailResult(success=False, error=str(e))
        except Exception as e:
            logger.error(f"Failed to send email to {message.to_email}: {e}")
            return EmailResult(success=False, error=str(e))

        logger.info(f"Email sent to {message.to_email}: message_id={response.message_id}")
        return EmailResult(success=True, message_id=response.message_id)

    def send_credentials(self, email: str, username: str, password: str) -> EmailResult:
        """Render and send the new-user credentials email."""
        return self.deliver(build_credentials_email(email, username, password))
