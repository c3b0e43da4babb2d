"""
Flask Extensions

The API has no user accounts, so the database is the only extension.
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()
