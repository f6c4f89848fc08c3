"""Build the account-credentials email sent to newly created admin users."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cms_admin.config import settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
_env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=select_autoescape(["html"]))

CREDENTIALS_TEMPLATE = "credentials.html"
CREDENTIALS_SUBJECT = "Your Account Credentials - Please Change Password"


@dataclass
class BuiltEmail:
    """A fully constructed email ready to send."""

    to_email: str
    to_name: str
    subject: str
    html_content: str
    tags: list[str]


def build_credentials_email(email: str, username: str, password: str, login_url: str | None = None) -> BuiltEmail:
    """Render the credentials email for ``username``.

    The password is the temporary one chosen by the admin; the email asks
    the user to change it after the first login.
    """
    context = {
        "username": username,
        "email": email,
        "password": password,
        "login_url": login_url or settings.login_url,
        "year": datetime.now(timezone.utc).year,
    }
    html_content = _env.get_template(CREDENTIALS_TEMPLATE).render(**context)
    logger.debug(f"Built credentials email for {email}")
    return BuiltEmail(
        to_email=email,
        to_name=username,
        subject=CREDENTIALS_SUBJECT,
        html_content=html_content,
        tags=["cms-admin", "credentials"],
    )
