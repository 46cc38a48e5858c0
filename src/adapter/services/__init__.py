from .sqlalchemy_connector import SqlAlchemyStoreConnector
from .error_classifier import classify_store_error

__all__ = [
    "SqlAlchemyStoreConnector",
    "classify_store_error",
]
