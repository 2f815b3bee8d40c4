# storefront/services/notification_service.py
import logging
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional
import aiosmtplib
from ..config import Config
from ..models.contact import ContactMessage
from ..models.order import Order
from ..utils.messages import Messages

class NotificationService:
    """Transactional email over SMTP; a failed send is logged and never raised"""

    def __init__(self, host: Optional[str] = None, port: Optional[int] = None,
                 username: Optional[str] = None, password: Optional[str] = None,
                 admin_email: Optional[str] = None):
        self.host = host or Config.SMTP_HOST
        self.port = port or Config.SMTP_PORT
        self.username = username if username is not None else Config.EMAIL_USER
        self.password = password if password is not None else Config.EMAIL_PASS
        self.admin_email = admin_email if admin_email is not None else Config.ADMIN_EMAIL
        self.messages = Messages()
        self.logger = logging.getLogger(__name__)

    async def send_email(self, to: str, subject: str, html: str) -> bool:
        """Send one HTML email"""
        if not to:
            self.logger.warning(f"Email '{subject}' skipped: no recipient")
            return False

        try:
            # header values with CR/LF raise ValueError here
            message = EmailMessage()
            message["From"] = formataddr((Config.MAIL_FROM_NAME, self.username))
            message["To"] = to
            message["Subject"] = subject
            message.set_content("This message requires an HTML capable mail client.")
            message.add_alternative(html, subtype="html")

            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                use_tls=self.port == 465,
                start_tls=self.port != 465
            )
            self.logger.info(f"Email '{subject}' sent to {to}")
            return True
        except Exception as e:
            self.logger.error(f"Email '{subject}' to {to!r} failed: {e}", exc_info=True)
            return False

    async def notify_admin_new_order(self, order: Order) -> bool:
        """Tell the shop admin about a freshly placed order"""
        return await self.send_email(
            self.admin_email,
            self.messages.new_order_subject(order),
            self.messages.new_order_admin(order)
        )

    async def notify_status_change(self, order_id: str, customer_name: str,
                                   email: str, status: str) -> bool:
        """Tell the customer their order moved to a new status"""
        return await self.send_email(
            email,
            self.messages.status_update_subject(order_id, status),
            self.messages.status_update(order_id, customer_name, status)
        )

    async def notify_contact(self, contact: ContactMessage) -> bool:
        """Forward a contact form message to the admin and confirm receipt to the sender

        Only the admin delivery decides the result; the confirmation is best effort.
        """
        delivered = await self.send_email(
            self.admin_email,
            self.messages.contact_subject(contact),
            self.messages.contact_admin(contact)
        )

        if delivered:
            await self.send_email(
                contact.email,
                self.messages.contact_confirmation_subject(),
                self.messages.contact_confirmation(contact)
            )

        return delivered
