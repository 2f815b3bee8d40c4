# storefront/utils/messages.py
from html import escape
from ..config import Config
from ..models.contact import ContactMessage
from ..models.order import Order
from ..utils.formatters import format_price

class Messages:
    """HTML bodies of the transactional emails"""

    @staticmethod
    def new_order_subject(order: Order) -> str:
        return f"New Order Alert #{order.id}"

    @staticmethod
    def new_order_admin(order: Order) -> str:
        """Summary sent to the shop admin when an order is placed"""
        items_html = "".join(
            f"<li>{escape(item.name)} (x{item.quantity}) - {format_price(item.price)}</li>"
            for item in order.items
        )

        return (
            "<h2>New Order Received!</h2>"
            f"<p><strong>Order ID:</strong> {escape(order.id)}</p>"
            f"<p><strong>Customer:</strong> {escape(order.shipping_details.full_name)}</p>"
            f"<p><strong>Total:</strong> {format_price(order.total)}</p>"
            f"<p><strong>Payment:</strong> {escape(order.payment_method)}</p>"
            "<hr/>"
            "<h3>Items:</h3>"
            f"<ul>{items_html}</ul>"
            "<p>Please check the Admin Dashboard to process this order.</p>"
        )

    @staticmethod
    def status_update_subject(order_id: str, status: str) -> str:
        return f"Order Update: #{order_id} is {status}"

    @staticmethod
    def status_update(order_id: str, customer_name: str, status: str) -> str:
        """Notice sent to the customer after an admin changes the status"""
        return (
            "<h2>Order Status Update</h2>"
            f"<p>Hello {escape(customer_name)},</p>"
            f"<p>Your order <strong>#{escape(order_id)}</strong> status has been updated to: "
            f'<span style="color:#065F46; font-weight:bold;">{escape(status)}</span>.</p>'
            f"<p>Thank you for shopping with {escape(Config.MAIL_FROM_NAME)}.</p>"
        )

    @staticmethod
    def contact_subject(contact: ContactMessage) -> str:
        return f"[Contact Form] {contact.subject} from {contact.name}"

    @staticmethod
    def contact_admin(contact: ContactMessage) -> str:
        """Contact form message as forwarded to the admin"""
        return (
            "<h2>New Contact Form Message Received</h2>"
            "<p>You have received a new message from the contact form.</p>"
            "<hr/>"
            f"<p><strong>Name:</strong> {escape(contact.name)}</p>"
            f"<p><strong>Email:</strong> {escape(contact.email)}</p>"
            f"<p><strong>Subject:</strong> {escape(contact.subject)}</p>"
            "<h3>Message:</h3>"
            '<p style="border:1px solid #ccc; padding:15px; background-color:#f9f9f9; white-space:pre-wrap;">'
            f"{escape(contact.message)}</p>"
        )

    @staticmethod
    def contact_confirmation_subject() -> str:
        return f"Confirmation: Your Message to {Config.MAIL_FROM_NAME}"

    @staticmethod
    def contact_confirmation(contact: ContactMessage) -> str:
        return (
            f"<h2>Thank You for Contacting {escape(Config.MAIL_FROM_NAME)}!</h2>"
            f"<p>Dear {escape(contact.name)},</p>"
            f"<p>We have successfully received your message regarding: <strong>{escape(contact.subject)}</strong>.</p>"
            "<p>Our concierge will review your inquiry and aim to respond within 24 hours.</p>"
        )
