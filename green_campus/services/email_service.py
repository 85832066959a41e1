from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors
import logging

from green_campus.config import settings
from green_campus.exceptions import InternalError

logger = logging.getLogger(__name__)


class EmailService:
    """Outgoing mail over SMTP. Without an SMTP host, messages are only logged."""

    def __init__(
        self,
        host: str = None,
        port: int = None,
        username: str = None,
        password: str = None,
        use_tls: bool = None,
        sender: str = None,
        sender_name: str = None,
    ):
        self.host = settings.smtp_host if host is None else host
        self.port = port or settings.smtp_port
        self.username = settings.smtp_username if username is None else username
        self.password = settings.smtp_password if password is None else password
        self.use_tls = settings.smtp_use_tls if use_tls is None else use_tls
        self.sender = sender or settings.mail_from
        self.sender_name = sender_name or settings.mail_from_name
        self._mailer = None

    @property
    def enabled(self) -> bool:
        return bool(self.host)

    def connection_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            MAIL_USERNAME=self.username,
            MAIL_PASSWORD=self.password,
            MAIL_FROM=self.sender,
            MAIL_FROM_NAME=self.sender_name,
            MAIL_PORT=self.port,
            MAIL_SERVER=self.host,
            MAIL_STARTTLS=self.use_tls,
            MAIL_SSL_TLS=False,
            USE_CREDENTIALS=bool(self.username),
            VALIDATE_CERTS=True,
        )

    @property
    def mailer(self) -> FastMail:
        if self._mailer is None:
            self._mailer = FastMail(self.connection_config())
        return self._mailer

    def build_message(self, to: str, subject: str, body: str) -> MessageSchema:
        return MessageSchema(
            subject=subject,
            recipients=[to],
            body=body,
            subtype=MessageType.plain,
        )

    async def send(self, to: str, subject: str, body: str) -> None:
        if not self.enabled:
            logger.info(f"SMTP not configured, email to {to} not delivered: {subject}")
            return

        try:
            await self.mailer.send_message(self.build_message(to, subject, body))
        except ConnectionErrors as e:
            logger.error(f"Failed to send email to {to}: {e}")
            raise InternalError("Failed to send email") from e
        logger.info(f"Sent email to {to}: {subject}")


_email_service = None


def get_email_service() -> EmailService:
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service
