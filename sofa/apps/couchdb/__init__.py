from .errors import (
    CouchDBError, ConfigurationError, SerializationFailure, TransportFailure,
    StatusFailure, DatabaseError, BadRequest, Unauthorized, Forbidden,
    ResourceNotFound, ResourceConflict, PreconditionFailed
)
from .connection import ConnectionConfig
from .executor import RequestExecutor, ResponseOutcome
from .probe import ExistenceProbe, Existence
from .store import CouchDBStore, create_store


__all__ = [
    'CouchDBStore',
    'create_store',
    'ConnectionConfig',
    'RequestExecutor',
    'ResponseOutcome',
    'ExistenceProbe',
    'Existence',
    #
    'CouchDBError',
    'ConfigurationError',
    'SerializationFailure',
    'TransportFailure',
    'StatusFailure',
    'DatabaseError',
    'BadRequest',
    'Unauthorized',
    'Forbidden',
    'ResourceNotFound',
    'ResourceConflict',
    'PreconditionFailed'
]
