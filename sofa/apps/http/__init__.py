from .client import HttpRequest, HttpResponse, HttpClient, full_url
from .wsgi import HttpWsgiClient
from .auth import Auth, HTTPBasicAuth


__all__ = [
    'HttpRequest',
    'HttpResponse',
    'HttpClient',
    'HttpWsgiClient',
    #
    'Auth',
    'HTTPBasicAuth',
    #
    'full_url'
]
