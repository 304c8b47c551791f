"""
Defines the SQLAlchemy Base for all ORM models in the application.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
