import os
import ssl
import json
import asyncio
import logging
from collections import namedtuple
from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse
from http.client import responses

from certifi import where
from httptools import HttpResponseParser, HttpParserError
from multidict import CIMultiDict

import sofa
from sofa.utils.exceptions import (
    HttpRequestException, HttpConnectionError, SSLError
)
from sofa.utils.string import to_bytes
from sofa.utils.httpurl import (
    CHARSET, CRLF, MAX_CHUNK_SIZE, NO_CONTENT_CODES, default_port,
    is_succesful, parse_options_header, path_quote, tls_schemes
)

from .auth import Auth, HTTPBasicAuth


LOGGER = logging.getLogger('sofa.http')
DEFAULT_CA_BUNDLE_PATH = where()


class RequestKey(namedtuple('RequestKey', 'scheme host port')):
    '''Scheme, host and port of a request, what a connection is opened to
    '''
    __slots__ = ()

    @property
    def address(self):
        return self.host, self.port

    @property
    def netloc(self):
        host = '[%s]' % self.host if ':' in self.host else self.host
        if self.port == default_port(self.scheme):
            return host
        return '%s:%s' % (host, self.port)

    @property
    def tls(self):
        return self.scheme in tls_schemes


def split_url_params(params):
    for key, values in params.items():
        if not isinstance(values, (list, tuple)):
            values = (values,)
        for value in values:
            yield key, value


def full_url(url, params=None):
    '''Quote the path of ``url`` and append ``params`` to its query'''
    p = urlparse(url)
    query = parse_qsl(p.query, True)
    if params:
        query.extend(split_url_params(params))
    return urlunparse((p.scheme, p.netloc, path_quote(p.path), p.params,
                       urlencode(query), p.fragment))


class HttpRequest:
    """A request of an :class:`HttpClient`.

    :param data: optional body, strings are encoded with ``charset``.
    :param params: optional mapping of query parameters, a list value
        repeats the parameter.
    :param auth: optional :class:`.Auth` or ``(username, password)``
        tuple for basic authentication.

    .. attribute:: key

        The :class:`RequestKey` of the remote server
    """
    def __init__(self, client, url, method, headers=None, data=None,
                 params=None, auth=None, charset=None):
        self.client = client
        self.method = method.upper()
        self.charset = charset or 'utf-8'
        self.version = client.version
        self.url = full_url(url, params)
        p = urlparse(self.url)
        if p.scheme not in ('http', 'https') or not p.hostname:
            raise HttpRequestException('Invalid url "%s"' % url)
        port = p.port if p.port is not None else default_port(p.scheme)
        self.key = RequestKey(p.scheme, p.hostname, port)
        self.headers = client.get_headers(headers)
        if 'host' not in self.headers:
            self.headers['Host'] = self.key.netloc
        if auth and not isinstance(auth, Auth):
            auth = HTTPBasicAuth(*auth)
        self.auth = auth
        if auth:
            auth(self)
        self.body = to_bytes(data, self.charset) if data else None
        # servers wait for the body of PUT and POST without a length
        if self.body or self.method in ('POST', 'PUT'):
            self.headers['Content-Length'] = str(len(self.body or b''))

    def __repr__(self):
        return self.first_line()
    __str__ = __repr__

    @property
    def path(self):
        """Path and query sent in the request line"""
        p = urlparse(self.url)
        return urlunparse(('', '', p.path or '/', p.params, p.query, ''))

    def first_line(self):
        return '%s %s %s' % (self.method, self.path, self.version)

    def encode(self):
        """Request line, headers and body as bytes
        """
        lines = [self.first_line()]
        lines.extend(('%s: %s' % item for item in self.headers.items()))
        head = (CRLF.join(lines) + CRLF + CRLF).encode(CHARSET)
        return head + self.body if self.body else head


class HttpResponse:
    """Response of an :class:`HttpRequest`.

    The :class:`HttpClient` returns it once complete, with the body
    buffered in :attr:`content` (``None`` for an empty body).
    """
    content = None
    version = None
    status_code = None
    parser = None

    def __init__(self, request):
        self.request = request
        self.headers = CIMultiDict()
        self._complete = False

    def __repr__(self):
        return '<Response [%s]>' % (self.status_code or 'None')
    __str__ = __repr__

    @property
    def url(self):
        return self.request.url

    @property
    def ok(self):
        return bool(self.status_code) and is_succesful(self.status_code)

    @property
    def reason(self):
        return responses.get(self.status_code)

    @property
    def is_complete(self):
        return self._complete

    @property
    def encoding(self):
        '''The charset of the ``content-type`` header, if any'''
        ct = self.headers.get('content-type')
        if ct:
            return parse_options_header(ct)[1].get('charset')

    @property
    def text(self):
        data = self.content
        return data.decode(self.encoding or 'utf-8') if data else ''

    def json(self):
        return json.loads(self.text)

    # httptools parser callbacks
    def on_header(self, name, value):
        self.headers.add(name.decode(CHARSET), value.decode(CHARSET))

    def on_headers_complete(self):
        self.status_code = self.parser.get_status_code()
        self.version = self.parser.get_http_version()
        # the Content-Length of a HEAD response is not followed by a body
        if (self.request.method == 'HEAD' or
                self.status_code in NO_CONTENT_CODES):
            self._complete = True

    def on_body(self, body):
        if self.content is None:
            self.content = body
        else:
            self.content += body

    def on_message_complete(self):
        self._complete = True

    def feed_eof(self):
        # a response without content-length is delimited by the close
        if self.status_code:
            self._complete = True


class HttpClient:
    """Asynchronous HTTP/1.1 client.

    Each request opens a new connection, closed once the response has
    been received. There is no connection pool and no retry.

    :param headers: headers overriding :attr:`DEFAULT_HTTP_HEADERS`,
        a ``None`` value removes the header.
    :param timeout: default timeout in seconds of a request, ``None`` or
        0 for no timeout.
    :param verify: TLS certificate verification. ``True`` verifies against
        the certifi bundle, a string is the path of a CA bundle file or
        directory, ``False`` disables verification.
    """
    client_version = sofa.CLIENT_SOFTWARE
    """Value of the ``User-Agent`` header"""
    version = 'HTTP/1.1'
    DEFAULT_HTTP_HEADERS = (
        ('Connection', 'close'),
        ('Accept', '*/*')
    )

    def __init__(self, headers=None, timeout=None, verify=True,
                 client_version=None, parser=None, logger=None):
        self.logger = logger or LOGGER
        self.client_version = client_version or self.client_version
        self.timeout = timeout
        self.verify = verify
        self.http_parser = parser or HttpResponseParser
        self.headers = CIMultiDict(self.DEFAULT_HTTP_HEADERS)
        self.headers['User-Agent'] = self.client_version
        self.headers = self.get_headers(headers)

    def __repr__(self):
        return self.__class__.__name__
    __str__ = __repr__

    # API
    def get(self, url, **kwargs):
        return self.request('GET', url, **kwargs)

    def head(self, url, **kwargs):
        return self.request('HEAD', url, **kwargs)

    def post(self, url, **kwargs):
        return self.request('POST', url, **kwargs)

    def put(self, url, **kwargs):
        return self.request('PUT', url, **kwargs)

    def delete(self, url, **kwargs):
        return self.request('DELETE', url, **kwargs)

    async def request(self, method, url, timeout=None, **params):
        """Send a request and wait for the complete response.

        :param timeout: optional timeout in seconds, overrides
            :attr:`timeout`.
        :param params: optional parameters of the :class:`HttpRequest`.
        :return: an :class:`HttpResponse`
        :raise HttpConnectionError: when the connection fails or the
            timeout expires.
        """
        if timeout is None:
            timeout = self.timeout
        request = HttpRequest(self, url, method, **params)
        if not timeout:
            return await self.send(request)
        try:
            return await asyncio.wait_for(self.send(request), timeout)
        except asyncio.TimeoutError:
            raise HttpConnectionError(
                'Timeout after %s seconds on %s' % (timeout, request),
                request=request) from None

    async def send(self, request):
        """Send ``request`` on a new connection and read the response
        """
        host, port = request.key.address
        sslcontext = self.ssl_context() if request.key.tls else None
        try:
            reader, writer = await asyncio.open_connection(
                host, port, ssl=sslcontext)
        except ssl.SSLError as exc:
            raise SSLError(str(exc), request=request) from exc
        except OSError as exc:
            raise HttpConnectionError(str(exc), request=request) from exc

        response = HttpResponse(request)
        response.parser = self.http_parser(response)
        try:
            writer.write(request.encode())
            await writer.drain()
            while not response.is_complete:
                data = await reader.read(MAX_CHUNK_SIZE)
                if not data:
                    response.feed_eof()
                    break
                response.parser.feed_data(data)
        except HttpParserError as exc:
            raise HttpRequestException(
                'Invalid HTTP response from %s: %s' % (request.key.netloc,
                                                       exc),
                request=request) from exc
        except ssl.SSLError as exc:
            raise SSLError(str(exc), request=request) from exc
        except OSError as exc:
            raise HttpConnectionError(str(exc), request=request) from exc
        finally:
            await self._close_writer(writer)

        if not response.is_complete:
            raise HttpConnectionError(
                'Connection closed by %s before a full response' %
                request.key.netloc, request=request)
        self.logger.debug('%s %s', request, response.status_code)
        return response

    async def _close_writer(self, writer):
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as exc:
            # shutdown errors do not change the outcome of the request
            self.logger.debug('Error while closing connection: %s', exc)

    async def close(self):
        """Nothing to release, connections are closed after each request
        """

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def get_headers(self, headers=None):
        '''A copy of :attr:`headers` updated with ``headers``'''
        d = CIMultiDict(self.headers)
        for name, value in (headers or {}).items():
            if value is None:
                d.pop(name, None)
            else:
                d[name] = value
        return d

    def ssl_context(self):
        """The :class:`ssl.SSLContext` of TLS connections"""
        verify = self.verify
        cafile = capath = None
        if isinstance(verify, str):
            if os.path.isdir(verify):
                capath = verify
            else:
                cafile = verify
        elif verify:
            cafile = DEFAULT_CA_BUNDLE_PATH

        context = ssl.create_default_context(cafile=cafile, capath=capath)
        if not verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context
