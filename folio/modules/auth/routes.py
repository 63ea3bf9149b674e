from . import auth_bp
from ...core.api import api_response, with_error_handler
from .utils import get_session


@auth_bp.route('/session', methods=['GET'])
@with_error_handler
def current_session():
    """Who the API thinks the caller is"""
    auth = get_session()
    return api_response({'user': auth.user.to_dict() if auth else None})
