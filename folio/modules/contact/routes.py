from flask import current_app, request

from . import contact_bp
from .models import ContactMessage, MESSAGE_STATUSES
from .schemas import ContactStatusUpdate, ContactSubmission
from ...core.api import api_response, parse_request_body, with_error_handler
from ...core.database import apply_changes, db, get_or_404, transaction
from ...core.errors import ValidationError
from ...core.logging_service import LoggingService
from ...core.query import ListQuery, PaginationParams
from ..auth import require_auth
from ..email import email_service
from ..settings.helpers import get_contact_email

THANK_YOU = "Your message has been sent successfully. We'll get back to you soon!"


def _client_ip():
    forwarded = request.headers.get('X-Forwarded-For')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.headers.get('X-Real-IP') or request.remote_addr or 'unknown'


def _notify_owner(message):
    """Fire-and-forget: the message is already stored whatever happens here."""
    try:
        recipient = email_service.admin_email or get_contact_email()
        sent = email_service.send_contact_notification(message.to_dict(), recipient)
    except Exception as e:
        LoggingService.error('contact', f'Failed to send email notification: {e}', {'messageId': message.id})
        return
    if not sent:
        LoggingService.warning('contact', 'Contact notification not sent', {'messageId': message.id})


@contact_bp.route('', methods=['POST'])
@with_error_handler
def submit_message():
    data = parse_request_body(ContactSubmission)

    message = ContactMessage(
        ip=_client_ip(),
        user_agent=request.headers.get('User-Agent', 'unknown'),
        **data.model_dump(),
    )
    with transaction():
        db.session.add(message)

    LoggingService.info('contact', f'New contact message from {message.email}', {'messageId': message.id})
    _notify_owner(message)

    return api_response({'id': message.id, 'message': THANK_YOU}, status=201)


@contact_bp.route('', methods=['GET'])
@with_error_handler
def list_messages():
    require_auth()
    params = PaginationParams.from_args(
        request.args, default_limit=current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    )

    status = request.args.get('status')
    if status and status not in MESSAGE_STATUSES:
        raise ValidationError(f"status: must be one of {', '.join(MESSAGE_STATUSES)}")

    query = (ListQuery(ContactMessage)
             .search(params.search, ContactMessage.name, ContactMessage.email, ContactMessage.subject)
             .filter_by_value(ContactMessage.status, status)
             .order(ContactMessage.created_at))

    page = query.paginate(params)
    return api_response(page.to_dict('messages', ContactMessage.to_dict))


@contact_bp.route('/<message_id>', methods=['GET'])
@with_error_handler
def get_message(message_id):
    require_auth()
    message = get_or_404(ContactMessage, message_id, 'Message not found')
    return api_response(message.to_dict())


@contact_bp.route('/<message_id>', methods=['PUT'])
@with_error_handler
def update_message_status(message_id):
    auth = require_auth()
    message = get_or_404(ContactMessage, message_id, 'Message not found')
    changes = parse_request_body(ContactStatusUpdate).model_dump()

    with transaction():
        apply_changes(message, changes)

    LoggingService.log_user_action('contact', f'Marked message {message.id} as {message.status}', auth.user.id)
    return api_response(message.to_dict())
