from .utils.exceptions import (
    SofaException, ImproperlyConfigured, HttpRequestException,
    HttpConnectionError, SSLError
)
from .utils.config import Config, Setting
from .apps.http import HttpClient, HttpWsgiClient, HTTPBasicAuth
from .apps.couchdb import (
    CouchDBStore, create_store, ConnectionConfig, RequestExecutor,
    ExistenceProbe, CouchDBError, ConfigurationError, SerializationFailure,
    TransportFailure, StatusFailure, DatabaseError, ResourceConflict,
    ResourceNotFound, PreconditionFailed
)


__all__ = [
    #
    # Config
    'Config',
    'Setting',
    #
    # HTTP
    'HttpClient',
    'HttpWsgiClient',
    'HTTPBasicAuth',
    #
    # CouchDB
    'CouchDBStore',
    'create_store',
    'ConnectionConfig',
    'RequestExecutor',
    'ExistenceProbe',
    #
    # Exceptions
    'SofaException',
    'ImproperlyConfigured',
    'HttpRequestException',
    'HttpConnectionError',
    'SSLError',
    'CouchDBError',
    'ConfigurationError',
    'SerializationFailure',
    'TransportFailure',
    'StatusFailure',
    'DatabaseError',
    'ResourceConflict',
    'ResourceNotFound',
    'PreconditionFailed'
]
