'''Text and bytes conversions used by the HTTP layer'''


def to_bytes(s, encoding=None, errors='strict'):
    '''Encode ``s`` with ``encoding``, bytes are returned as they are'''
    if isinstance(s, bytes):
        return s
    return str(s).encode(encoding or 'utf-8', errors)


def to_string(s, encoding=None, errors='strict'):
    '''Decode bytes with ``encoding``, other objects are converted via str'''
    if isinstance(s, bytes):
        return s.decode(encoding or 'utf-8', errors)
    return str(s)
