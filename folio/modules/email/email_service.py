"""
Email Service Module
====================

Notification sink with three providers, selected via EMAIL_PROVIDER:
- 'log': nothing leaves the process, the email is written to the app log
- 'resend': HTTPS POST to the Resend API
- 'smtp': plain SMTP with STARTTLS (e.g. Gmail)

Sending never raises; callers get True/False and failures are logged.
"""

import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict, List, Optional

import requests

from ...core.logging_service import LoggingService
from ...core.validation import EMAIL_RE

logger = logging.getLogger(__name__)

RESEND_API_URL = 'https://api.resend.com/emails'
REQUEST_TIMEOUT = 10


class EmailService:
    """
    Configuration (set in Flask app.config):
        EMAIL_PROVIDER: 'log' (default), 'resend' or 'smtp'
        RESEND_API_KEY: Resend API key (required if provider is 'resend')
        EMAIL_HOST / EMAIL_PORT / EMAIL_PASSWORD: SMTP server (provider 'smtp')
        EMAIL_ADDRESS: Sender address (default: onboarding@resend.dev)
        EMAIL_BRAND_NAME: Name used in subjects and footers
        EMAIL_ADMIN_EMAIL: Where contact notifications go
    """

    def __init__(self, app=None):
        self.provider = 'log'
        self.api_key = None
        self.sender_email = None
        self.brand_name = 'Folio'
        self.admin_email = None
        self.smtp_host = 'smtp.gmail.com'
        self.smtp_port = 587
        self.smtp_password = None

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize email service with Flask app configuration"""
        self.provider = (app.config.get('EMAIL_PROVIDER') or 'log').lower()
        self.sender_email = app.config.get('EMAIL_ADDRESS', 'onboarding@resend.dev')
        self.brand_name = app.config.get('EMAIL_BRAND_NAME', 'Folio')
        self.admin_email = app.config.get('EMAIL_ADMIN_EMAIL')
        self.api_key = app.config.get('RESEND_API_KEY')
        self.smtp_host = app.config.get('EMAIL_HOST', 'smtp.gmail.com')
        self.smtp_port = int(app.config.get('EMAIL_PORT', 587))
        self.smtp_password = app.config.get('EMAIL_PASSWORD')

        logger.info(f"Email service initialised (provider: {self.provider}, sender: {self.sender_email})")

        if self.provider == 'resend' and not self.api_key:
            logger.warning("RESEND_API_KEY not configured - email sending disabled")

    def send_email(self, to: List[str], subject: str, html_body: str,
                   text_body: Optional[str] = None) -> bool:
        """
        Send an email to each recipient via the configured provider.

        Returns:
            bool: True if at least one email was sent successfully, False otherwise
        """
        valid_recipients = []
        for addr in to or []:
            if addr and EMAIL_RE.match(addr):
                valid_recipients.append(addr)
            else:
                logger.warning(f"Skipping invalid email address: {addr}")

        if not valid_recipients:
            logger.error("No valid recipients after filtering")
            return False

        sent_count = 0
        for recipient in valid_recipients:
            try:
                if self.provider == 'resend':
                    success = self._send_via_resend(recipient, subject, html_body, text_body)
                elif self.provider == 'smtp':
                    success = self._send_via_smtp(recipient, subject, html_body, text_body)
                else:
                    success = self._send_via_log(recipient, subject, text_body or html_body)
            except Exception as send_error:
                logger.error(f"Error sending to {recipient}: {send_error}")
                success = False

            if success:
                sent_count += 1
            else:
                LoggingService.warning('email', f"Failed to send '{subject}'", {
                    'recipient': recipient,
                    'provider': self.provider,
                })

        return sent_count > 0

    def _send_via_log(self, recipient: str, subject: str, body: str) -> bool:
        LoggingService.info('email', f"Email to {recipient}: {subject}", {'body': body})
        return True

    def _send_via_resend(self, recipient: str, subject: str, html_body: str,
                         text_body: Optional[str] = None) -> bool:
        """Send a single email via the Resend HTTP API"""
        if not self.api_key:
            logger.error("Resend API key not configured")
            return False

        payload = {
            "from": self.sender_email,
            "to": [recipient],
            "subject": subject,
            "html": html_body,
        }
        if text_body:
            payload["text"] = text_body

        response = requests.post(
            RESEND_API_URL,
            json=payload,
            headers={'Authorization': f'Bearer {self.api_key}'},
            timeout=REQUEST_TIMEOUT,
        )
        if response.ok:
            logger.debug(f"Email sent to {recipient}, ID: {response.json().get('id')}")
            return True

        logger.error(f"Resend error for {recipient}: {response.status_code} {response.text}")
        return False

    def _send_via_smtp(self, recipient: str, subject: str, html_body: str,
                       text_body: Optional[str] = None) -> bool:
        """Send a single email via SMTP"""
        if not self.smtp_password:
            logger.error("SMTP password not configured")
            return False

        msg = MIMEMultipart('alternative')
        msg['From'] = self.sender_email
        msg['To'] = recipient
        msg['Subject'] = subject

        if text_body:
            msg.attach(MIMEText(text_body, 'plain', 'utf-8'))
        msg.attach(MIMEText(html_body, 'html', 'utf-8'))

        with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
            server.starttls()
            server.login(self.sender_email, self.smtp_password)
            server.send_message(msg)

        logger.info(f"SMTP email sent to {recipient}")
        return True

    def send_contact_notification(self, message: Dict[str, Any], recipient: Optional[str] = None) -> bool:
        """Tell the site owner about a new contact form message"""
        recipient = recipient or self.admin_email
        if not recipient:
            logger.warning("Admin email not configured - skipping contact notification")
            return False

        try:
            subject = f"New Contact Form Message: {message.get('subject', '')}"
            html_body, text_body = self._contact_template(message)
            return self.send_email([recipient], subject, html_body, text_body)
        except Exception as e:
            logger.error(f"Failed to build contact notification: {e}")
            return False

    def _contact_template(self, message: Dict[str, Any]):
        fields = [
            ('Name', message.get('name')),
            ('Email', message.get('email')),
            ('Company', message.get('company') or 'N/A'),
            ('Phone', message.get('phone') or 'N/A'),
            ('Website', message.get('website') or 'N/A'),
            ('Source', message.get('source') or 'N/A'),
            ('Newsletter', 'Yes' if message.get('newsletter') else 'No'),
        ]
        rows = ''.join(
            f"<p><strong>{label}:</strong> {html.escape(str(value))}</p>"
            for label, value in fields
        )
        html_body = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2>New Contact Message</h2>
            <div style="background: #f8f9fa; padding: 20px; border-radius: 5px; margin: 20px 0;">
                {rows}
            </div>
            <h3>Message:</h3>
            <p style="white-space: pre-wrap;">{html.escape(message.get('message', ''))}</p>
            <p style="color: #6c757d; font-size: 12px;">
                This is an automated notification from {html.escape(self.brand_name)}.
            </p>
        </div>
        """

        text_lines = ['NEW CONTACT MESSAGE', '']
        text_lines += [f"- {label}: {value}" for label, value in fields]
        text_lines += ['', message.get('message', ''), '', '---', self.brand_name]
        return html_body, '\n'.join(text_lines)


# Global email service instance
email_service = EmailService()
