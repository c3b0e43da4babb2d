"""
API Routes

``GET /api?action=...`` for reads, ``POST /api`` with a form-encoded body for
writes. Every response, failures included, is a JSON envelope carrying a
``success`` flag.
"""

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from binmonitor.api import api_bp
from binmonitor.api.dispatcher import dispatch, resolve_action
from binmonitor.errors import ApiError
from binmonitor.store import store_session

logger = logging.getLogger(__name__)


@api_bp.route('', methods=['GET', 'POST'])
@api_bp.route('/', methods=['GET', 'POST'])
def index():
    """Run the requested action and return its envelope."""
    action = resolve_action(request.values.get('action', 'unknown'))
    
    is_write = request.method == 'POST'
    values = request.form if is_write else request.args
    
    with store_session() as session:
        result = dispatch(session, action, values, is_write)
    
    return jsonify(result.to_envelope())


@api_bp.errorhandler(ApiError)
def handle_api_error(error):
    logger.warning('API error (%s): %s', request.values.get('action'), error.message)
    return jsonify(error.to_envelope()), error.status_code


@api_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    if isinstance(error, HTTPException):
        return error
    logger.exception('API exception (%s): %s', request.values.get('action'), error)
    return jsonify({'success': False, 'message': 'An unexpected error occurred.'}), 500
