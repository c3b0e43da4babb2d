"""
Store Session

Each API request gets one store session, passed explicitly to the action
handler and released when the request is done.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError

from binmonitor.errors import StoreConnectionError
from binmonitor.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def store_session():
    """Yield a connected store session and close it on every exit path.
    
    Raises:
        StoreConnectionError: if no connection to the store can be opened
    """
    session = db.session
    try:
        try:
            # Force a connection checkout so an unreachable store fails here
            session.connection()
        except (OperationalError, InterfaceError) as e:
            logger.error('Database connection failed: %s', e)
            raise StoreConnectionError() from e
        yield session
    finally:
        session.close()
