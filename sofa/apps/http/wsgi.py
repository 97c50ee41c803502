"""Classes for testing WSGI servers using the HttpClient
"""
import sys
from io import BytesIO
from urllib.parse import urlparse, unquote

from sofa.utils.httpurl import CHARSET

from .client import HttpClient, HttpResponse


def wsgi_environ(request):
    """Build a WSGI ``environ`` dictionary from an :class:`.HttpRequest`
    """
    url = urlparse(request.url)
    body = request.body or b''
    environ = {
        'REQUEST_METHOD': request.method,
        'SCRIPT_NAME': '',
        'PATH_INFO': unquote(url.path, CHARSET) or '/',
        'RAW_URI': request.path,
        'QUERY_STRING': url.query,
        'SERVER_NAME': request.key.host,
        'SERVER_PORT': str(request.key.port),
        'SERVER_PROTOCOL': request.version,
        'wsgi.version': (1, 0),
        'wsgi.url_scheme': request.key.scheme,
        'wsgi.input': BytesIO(body),
        'wsgi.errors': sys.stderr,
        'wsgi.multithread': False,
        'wsgi.multiprocess': False,
        'wsgi.run_once': False
    }
    for name, value in request.headers.items():
        key = name.upper().replace('-', '_')
        if key == 'CONTENT_TYPE':
            environ['CONTENT_TYPE'] = value
        elif key == 'CONTENT_LENGTH':
            environ['CONTENT_LENGTH'] = value
        else:
            key = 'HTTP_%s' % key
            if key in environ:
                value = '%s,%s' % (environ[key], value)
            environ[key] = value
    return environ


class HttpWsgiClient(HttpClient):
    """A client for http requests to a WSGI server handler.

    Requests are not sent through the wire, instead they are passed
    to the ``wsgi_callable`` in the same process.

    .. attribute:: wsgi_callable

        The WSGI server handler to test
    """
    client_version = 'Sofa-Http-Wsgi-Client'

    def __init__(self, wsgi_callable, **kwargs):
        self.wsgi_callable = wsgi_callable
        super().__init__(**kwargs)
        self.headers['X-Http-Local'] = 'local'

    async def send(self, request):
        response = HttpResponse(request)
        environ = wsgi_environ(request)

        def start_response(status, response_headers, exc_info=None):
            response.status_code = int(status.split(' ', 1)[0])
            for name, value in response_headers:
                response.headers.add(name, value)

        result = self.wsgi_callable(environ, start_response)
        try:
            content = b''.join(result)
        finally:
            if hasattr(result, 'close'):
                result.close()
        response.version = request.version
        if request.method != 'HEAD' and content:
            response.content = content
        response.on_message_complete()
        self.logger.debug('%s %s', request, response.status_code)
        return response
