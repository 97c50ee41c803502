'''
Exceptions of the sofa library.

The CouchDB client errors are in :mod:`sofa.apps.couchdb.errors`.
'''
__all__ = ['SofaException',
           'ImproperlyConfigured',
           # HTTP client exception
           'HttpRequestException',
           'HttpConnectionError',
           'SSLError']


class SofaException(Exception):
    '''Base class of all sofa exceptions.'''


class ImproperlyConfigured(SofaException):
    '''Inconsistent configuration.

    .. attribute:: exit_code

        exit code of a script failing with this exception, 2.
    '''
    exit_code = 2


# #################################################################### HTTP
class HttpRequestException(IOError):
    '''Failure of an HTTP request.

    :param request: the :class:`.HttpRequest`, if available.
    :param response: the :class:`.HttpResponse`, if one was received.
        When ``request`` is not given it is taken from the response.
    '''
    def __init__(self, *args, request=None, response=None):
        self.response = response
        if request is None and response is not None:
            request = getattr(response, 'request', None)
        self.request = request
        super().__init__(*args)


class HttpConnectionError(HttpRequestException):
    '''The connection failed, timed out or was closed before a
    full response was received.'''


class SSLError(HttpConnectionError):
    '''TLS handshake or certificate failure.'''
