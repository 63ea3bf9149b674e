"""
Email Module
============

Outgoing notifications. Only the contact form uses it today: a new message
is forwarded to the site owner through the configured provider.
"""

from .email_service import EmailService, email_service

__all__ = ['EmailService', 'email_service']
