"""
Action Dispatcher

Maps every Action to its handler and runs it against the request's store
session. POST requests are writes: the handler runs in a transaction that is
committed when it returns and rolled back when it raises.
"""

import logging

from markupsafe import escape
from sqlalchemy.exc import SQLAlchemyError

from binmonitor.api import handlers
from binmonitor.api.actions import Action, parse_params
from binmonitor.errors import ApiError, StoreOperationError, UnknownActionError, ValidationError

logger = logging.getLogger(__name__)

ACTION_HANDLERS = {
    Action.GET_BINS: handlers.get_bins,
    Action.GET_DELETED_BINS: handlers.get_deleted_bins,
    Action.GET_BIN_DETAILS: handlers.get_bin_details,
    Action.GET_BIN_LOCATIONS: handlers.get_bin_locations,
    Action.ADD_BIN: handlers.add_bin,
    Action.DELETE_BIN: handlers.delete_bin,
    Action.RECOVER_BIN: handlers.recover_bin,
    Action.UPDATE_BIN_DETAIL: handlers.update_bin_detail,
    Action.ADD_SENSOR: handlers.add_sensor,
    Action.DELETE_SENSOR: handlers.delete_sensor,
    Action.UPDATE_SENSOR_READING: handlers.update_sensor_reading,
    Action.SUBMIT_CONTACT: handlers.submit_contact,
}


def resolve_action(name):
    """Turn the raw ``action`` parameter into an Action.
    
    Raises:
        UnknownActionError: for anything outside the enumeration
    """
    try:
        return Action(name)
    except ValueError:
        raise UnknownActionError(f'Unknown API action specified: {escape(name)}') from None


def dispatch(session, action, values, is_write):
    """
    Run one action and return its result.
    
    Args:
        session: Store session for this request
        action: Action to run
        values: Request parameters (query string or form body)
        is_write: True for state-changing requests, which run in a transaction
    
    Returns:
        The action's ActionResult
    """
    if action.is_write and not is_write:
        raise ValidationError(f'Invalid request method for {action.value}. POST required.')
    
    params = parse_params(action, values)
    handler = ACTION_HANDLERS[action]
    
    try:
        result = handler(session, params)
        if is_write:
            session.commit()
            logger.info('Transaction committed for action: %s', action.value)
        return result
    except ApiError:
        _rollback(session, action, is_write)
        raise
    except SQLAlchemyError as e:
        _rollback(session, action, is_write)
        logger.error('Store error during %s: %s', action.value, e)
        raise StoreOperationError(f'Database error while running {action.value}.') from e
    except Exception:
        _rollback(session, action, is_write)
        raise


def _rollback(session, action, is_write):
    session.rollback()
    if is_write:
        logger.info('Transaction rolled back for action: %s', action.value)
