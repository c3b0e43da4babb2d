"""
API Blueprint

Single JSON endpoint dispatching on the ``action`` parameter.
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

from binmonitor.api import routes  # noqa: E402, F401
