'''Errors raised by the CouchDB client.

All of them derive from :class:`CouchDBError` and carry a
:attr:`~CouchDBError.kind` tag, one of ``configuration``, ``serialization``,
``transport``, ``status`` and ``database``. Errors raised after a response
was received carry it in the ``response`` attribute so that the parsed body
is available to the caller.
'''
from sofa.utils.exceptions import SofaException, ImproperlyConfigured


__all__ = ['CouchDBError',
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
           'PreconditionFailed',
           'couch_db_error']


class CouchDBError(SofaException):
    kind = None
    status_code = None
    error = None
    reason = None

    def __init__(self, msg='', response=None):
        self.response = response
        super().__init__(msg)

    @property
    def data(self):
        '''The parsed body of the response, if any'''
        if self.response is not None:
            return self.response.data


class ConfigurationError(CouchDBError, ImproperlyConfigured):
    '''Malformed connection url'''
    kind = 'configuration'


class SerializationFailure(CouchDBError):
    '''A document could not be encoded to JSON or a response body
    could not be decoded'''
    kind = 'serialization'


class TransportFailure(CouchDBError):
    '''Connection level failure, no status code available'''
    kind = 'transport'


class StatusFailure(CouchDBError):
    '''HTTP status code >= 300 without a CouchDB error body'''
    kind = 'status'

    def __init__(self, status_code, response=None):
        self.status_code = status_code
        super().__init__('Status code: %s' % status_code, response=response)


class DatabaseError(CouchDBError):
    '''HTTP status code >= 300 with a CouchDB ``error`` and ``reason``'''
    kind = 'database'

    def __init__(self, error, reason=None, status_code=None, response=None):
        self.error = error
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason or error, response=response)


class BadRequest(DatabaseError):
    pass


class Unauthorized(DatabaseError):
    pass


class Forbidden(DatabaseError):
    pass


class ResourceNotFound(DatabaseError):
    pass


class ResourceConflict(DatabaseError):
    pass


class PreconditionFailed(DatabaseError):
    pass


error_classes = {'bad_request': BadRequest,
                 'unauthorized': Unauthorized,
                 'forbidden': Forbidden,
                 'not_found': ResourceNotFound,
                 'conflict': ResourceConflict,
                 'file_exists': PreconditionFailed}


def couch_db_error(status_code, error=None, reason=None, response=None):
    '''Build the :class:`DatabaseError` for a CouchDB error body'''
    error_class = DatabaseError
    if isinstance(error, str):
        error_class = error_classes.get(error, DatabaseError)
    return error_class(error, reason, status_code=status_code,
                       response=response)
