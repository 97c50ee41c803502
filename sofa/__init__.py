# -*- coding: utf-8 -
"""Asynchronous CouchDB document client"""
from .utils.version import get_version


VERSION = (0, 2, 0, 'final', 0)

__version__ = version = get_version(VERSION)

SERVER_NAME = 'sofa'
CLIENT_SOFTWARE = "{0}/{1}".format(SERVER_NAME, version)
