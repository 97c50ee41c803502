from base64 import b64encode

from sofa.utils.httpurl import DEFAULT_CHARSET
from sofa.utils.string import to_string


__all__ = ['Auth',
           'HTTPBasicAuth']


class Auth:
    '''Base class of authentication handlers.

    An :class:`Auth` is invoked with the :class:`.HttpRequest` before it
    is sent and adds its credentials to the request headers.
    '''
    type = None

    def __call__(self, request):
        raise NotImplementedError

    def __str__(self):
        return self.__repr__()


class HTTPBasicAuth(Auth):
    '''HTTP Basic Authentication.

    The password can be omitted, an empty one is sent.
    '''
    type = 'basic'

    def __init__(self, username, password=None):
        self.username = username
        self.password = password

    def __call__(self, request):
        request.headers['Authorization'] = self.header()
        return request

    def header(self):
        '''Value of the ``Authorization`` header'''
        credentials = '%s:%s' % (self.username, self.password or '')
        token = b64encode(credentials.encode(DEFAULT_CHARSET))
        return 'Basic %s' % to_string(token, DEFAULT_CHARSET)

    def __repr__(self):
        return 'Basic: %s' % self.username
