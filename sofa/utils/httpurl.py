'''Constants and helpers for HTTP urls and headers.'''
import re
from urllib.parse import quote

from .string import to_string


tls_schemes = ('https', 'wss')

# Header charset, RFC 2616 section 3.7.1
CHARSET = 'ISO-8859-1'
DEFAULT_CHARSET = 'utf-8'
CRLF = '\r\n'
MAX_CHUNK_SIZE = 65536

# left as they are in a path, together with "%" of encoded sequences
PATH_SAFE = "/:@!$&'()*+,;=~%"

GET = 'GET'
DELETE = 'DELETE'
HEAD = 'HEAD'
POST = 'POST'
PUT = 'PUT'

ENCODE_BODY_METHODS = frozenset((POST, PUT))
NO_CONTENT_CODES = frozenset((204, 304))

_stray_percent = re.compile('%(?![0-9A-Fa-f]{2})')

_separators = re.escape('()<>@,;:\\"/[]?={} \t')
_token_or_quoted = '(?:[^%s]+|"(?:\\\\.|[^"])*")' % _separators
_header_param = re.compile(r'(?:;|^)\s*([^%s]+)\s*=\s*(%s)'
                           % (_separators, _token_or_quoted))


def path_quote(path):
    """Quote a URL ``path``.

    Slashes and sub-delimiters are preserved, anything else outside the
    unreserved set is percent-encoded. Valid escapes are left as they
    are and a ``%`` which does not start one is encoded, so quoting an
    already quoted path does not change it.
    """
    path = _stray_percent.sub('%25', to_string(path))
    return quote(path, safe=PATH_SAFE)


def segment_quote(value):
    """Quote ``value`` as literal text of a URL path, ``/`` is preserved.

    Unlike :func:`path_quote` every ``%`` is encoded, ``50%`` becomes
    ``50%25`` and ``a%41`` becomes ``a%2541``.
    """
    return quote(to_string(value), safe=PATH_SAFE.replace('%', ''))


def default_port(scheme):
    return 443 if scheme in tls_schemes else 80


def is_succesful(status):
    '''2xx status is succesful'''
    return 200 <= status < 300


def header_unquote(value):
    '''Strip the quotes of a quoted-string header value'''
    if len(value) > 1 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
        return value.replace('\\\\', '\\').replace('\\"', '"')
    return value


def parse_options_header(header):
    '''Split a header such as ``Content-Type`` into its lower-cased value
    and a dictionary of parameters.'''
    value, _, params = header.partition(';')
    options = {}
    for match in _header_param.finditer(params):
        options[match.group(1).lower()] = header_unquote(match.group(2))
    return value.lower().strip(), options
