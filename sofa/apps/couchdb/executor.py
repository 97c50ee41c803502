import json
import asyncio
import logging
from collections import namedtuple
from urllib.parse import urlencode

from sofa.apps.http import HttpClient
from sofa.utils.httpurl import (
    GET, DELETE, HEAD, POST, PUT, ENCODE_BODY_METHODS
)

from .connection import ConnectionConfig
from .errors import (
    SerializationFailure, TransportFailure, StatusFailure, couch_db_error
)


__all__ = ['ResponseOutcome', 'RequestExecutor', 'encode_query']

LOGGER = logging.getLogger('sofa.couchdb')
JSON_CONTENT_TYPE = 'application/json'


class ResponseOutcome(namedtuple('ResponseOutcome',
                                 'status_code headers data')):
    '''The outcome of a request executed by a :class:`RequestExecutor`.

    .. attribute:: data

        The parsed JSON body, ``None`` when the body was empty
    '''
    __slots__ = ()

    @property
    def ok(self):
        return self.status_code < 300

    @property
    def etag(self):
        return self.headers.get('etag')


def encode_query(data):
    '''Encode ``data`` as a CouchDB query string.

    Booleans are encoded as ``true``/``false`` and ``None`` values
    are dropped.
    '''
    params = []
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        params.append((key, value))
    return urlencode(params)


class RequestExecutor:
    '''Execute JSON requests against a CouchDB database.

    :param config: a :class:`.ConnectionConfig` or a base url.
    :param http: the HTTP transport, an object with an asynchronous
        ``request(method, url, headers=None, data=None)`` method returning
        a response with ``status_code``, ``headers`` and ``content``.
        If not provided a new :class:`.HttpClient` is used.
    :param timeout: timeout of the default :class:`.HttpClient`.

    The executor does not keep any state between requests.
    '''
    methods = frozenset((HEAD, GET, PUT, POST, DELETE))

    def __init__(self, config, http=None, timeout=None):
        self.config = ConnectionConfig.from_url(config)
        self.http = http if http is not None else HttpClient(timeout=timeout)

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.config.url)
    __str__ = __repr__

    async def execute(self, method, path=None, data=None):
        '''Execute a request and classify its response.

        :param method: one of ``HEAD``, ``GET``, ``PUT``, ``POST`` and
            ``DELETE``.
        :param path: document path relative to the path prefix.
        :param data: the JSON body of ``PUT`` and ``POST`` requests,
            the query parameters otherwise.
        :return: a :class:`ResponseOutcome` when the status code is
            below 300.
        :raise: a :class:`.CouchDBError` otherwise.
        '''
        method = method.upper()
        if method not in self.methods:
            raise ValueError('Unsupported method %s' % method)
        body = query = None
        if method in ENCODE_BODY_METHODS:
            if data is not None:
                body = self.encode(data)
        elif data:
            query = encode_query(data)

        url = self.config.url_for(path, query)
        headers = self.headers(body is not None)
        LOGGER.debug('%s %s', method, url)
        try:
            response = await self.http.request(method, url, headers=headers,
                                               data=body)
        # HttpRequestException is an IOError
        except (OSError, asyncio.TimeoutError) as exc:
            raise TransportFailure(
                '%s %s failed: %s' %
                (method, url, str(exc) or exc.__class__.__name__)
            ) from exc
        return self.classify(response)

    def headers(self, body=False):
        headers = {'Host': self.config.netloc,
                   'Accept': JSON_CONTENT_TYPE}
        if body:
            headers['Content-Type'] = JSON_CONTENT_TYPE
        auth = self.config.auth
        if auth:
            headers['Authorization'] = auth.header()
        return headers

    def encode(self, data):
        '''Encode ``data`` as a JSON body, strings are sent as they are'''
        if isinstance(data, bytes):
            return data
        if not isinstance(data, str):
            try:
                data = json.dumps(data, allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise SerializationFailure(
                    'Could not encode %s as JSON: %s' %
                    (type(data).__name__, exc)) from exc
        return data.encode('utf-8')

    def classify(self, response):
        '''Build the :class:`ResponseOutcome` from a transport ``response``
        '''
        status_code = response.status_code
        content = response.content
        data = None
        if content:
            try:
                data = json.loads(content.decode('utf-8'))
            except ValueError as exc:
                outcome = ResponseOutcome(
                    status_code, response.headers,
                    content.decode('utf-8', 'replace'))
                if outcome.ok:
                    raise SerializationFailure(
                        'Could not decode response body: %s' % exc,
                        response=outcome) from exc
                raise StatusFailure(status_code, response=outcome) from exc

        outcome = ResponseOutcome(status_code, response.headers, data)
        LOGGER.debug('Response status %s', status_code)
        if outcome.ok:
            return outcome
        elif isinstance(data, dict) and data.get('error'):
            raise couch_db_error(status_code, data['error'],
                                 data.get('reason'), response=outcome)
        else:
            raise StatusFailure(status_code, response=outcome)
