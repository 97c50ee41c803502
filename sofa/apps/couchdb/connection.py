from collections import namedtuple
from urllib.parse import urlsplit, unquote

from sofa.apps.http import HTTPBasicAuth
from sofa.utils.httpurl import default_port, segment_quote, tls_schemes

from .errors import ConfigurationError


__all__ = ['ConnectionConfig']


# url scheme -> HTTP scheme
schemes = {'http': 'http',
           'https': 'https',
           'couchdb': 'http',
           'http+couchdb': 'http',
           'https+couchdb': 'https'}


class ConnectionConfig(namedtuple('ConnectionConfig',
                                  'scheme host port path user password')):
    '''Connection parameters of a CouchDB database.

    Built once from a base url via :meth:`from_url` and never modified,
    it can be shared by any number of concurrent operations.

    .. attribute:: path

        Path prefix prepended to all document paths, usually ``/dbname``
    '''
    __slots__ = ()

    @classmethod
    def from_url(cls, url):
        '''Parse a base ``url`` into a :class:`ConnectionConfig`.

        The port defaults to 443 for secure schemes and 80 otherwise.
        Credentials embedded in the url are percent-decoded.

        :raise ConfigurationError: when the url cannot be parsed
        '''
        if isinstance(url, cls):
            return url
        if not url or not isinstance(url, str):
            raise ConfigurationError('No url given')
        try:
            bits = urlsplit(url.strip())
            port = bits.port
        except ValueError as exc:
            raise ConfigurationError('Invalid url: %s' % exc) from exc
        if port == 0:
            raise ConfigurationError('Invalid url: port 0')
        scheme = schemes.get(bits.scheme.lower())
        if not scheme:
            raise ConfigurationError('Unsupported scheme "%s"' % bits.scheme)
        if not bits.hostname:
            raise ConfigurationError('No host in url')
        if bits.query or bits.fragment:
            raise ConfigurationError('url must not have query or fragment')
        user = unquote(bits.username) if bits.username else None
        password = unquote(bits.password) if bits.password else None
        if password and not user:
            raise ConfigurationError('password but not user')
        if port is None:
            port = default_port(scheme)
        return cls(scheme, bits.hostname, port,
                   bits.path.rstrip('/'), user, password)

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.url)
    __str__ = __repr__

    @property
    def secure(self):
        return self.scheme in tls_schemes

    @property
    def netloc(self):
        '''Host and port, the port is omitted when it is the default one'''
        host = '[%s]' % self.host if ':' in self.host else self.host
        if self.port == default_port(self.scheme):
            return host
        return '%s:%s' % (host, self.port)

    @property
    def address(self):
        return '%s://%s' % (self.scheme, self.netloc)

    @property
    def url(self):
        '''The base url with the password masked'''
        pre = ''
        if self.user:
            pre = '%s:***@' % self.user if self.password else '%s@' % self.user
        return '%s://%s%s%s' % (self.scheme, pre, self.netloc, self.path)

    @property
    def auth(self):
        '''An :class:`.HTTPBasicAuth` when credentials are configured'''
        if self.user:
            return HTTPBasicAuth(self.user, self.password)

    def path_for(self, path=None):
        '''Resolve the logical ``path`` against the path prefix.

        ``path`` is quoted as literal text, only ``/`` keeps its meaning.
        '''
        return '%s/%s' % (self.path, segment_quote(path or ''))

    def url_for(self, path=None, query=None):
        url = '%s%s' % (self.address, self.path_for(path))
        if query:
            url = '%s?%s' % (url, query)
        return url
