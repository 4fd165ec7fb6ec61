""""""
from flask import current_app
from flask_mail import Message

from labbook.core.extensions import get_extension
from labbook.services.base import Service


class MailService(Service):
    """Send email through the Flask-Mail extension.

    Flask-Mail does not deliver anything when `MAIL_SUPPRESS_SEND` is set
    (the default when `TESTING` is set); messages are still recorded by
    :meth:`flask_mail.Mail.record_messages`. Nothing is sent while the service
    is stopped.
    """

    name = "mailer"

    def send(self, message: Message) -> int:
        """Send `message` and return the number of recipients it was sent to.

        Transport errors (:class:`smtplib.SMTPException`, :class:`OSError`) are
        propagated.
        """
        if not self.running:
            self.logger.warning(
                "Mail service is not running, not sending %r", message.subject
            )
            return 0

        recipients = list(message.send_to)
        if not recipients:
            self.logger.debug("Message %r has no recipient", message.subject)
            return 0

        if not message.extra_headers:
            message.extra_headers = {}
        message.extra_headers.setdefault("Sender", current_app.config["MAIL_SENDER"])

        mail = get_extension("mail")
        self.logger.debug(
            "Sending mail %r to %d recipient(s)", message.subject, len(recipients)
        )
        mail.send(message)
        return len(recipients)
