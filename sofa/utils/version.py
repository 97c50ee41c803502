symbol = {'alpha': 'a', 'beta': 'b'}


def get_version(version):
    '''Version string of a ``(major, minor, micro, level, serial)`` tuple.

    ``level`` is one of ``alpha``, ``beta``, ``rc`` and ``final``, the
    serial is only used by pre-releases::

        >>> get_version((0, 2, 0, 'beta', 1))
        '0.2.0b1'
    '''
    assert len(version) == 5
    assert version[3] in ('alpha', 'beta', 'rc', 'final')
    main = '.'.join(map(str, version[:3]))
    if version[3] == 'final':
        return main
    return '%s%s%s' % (main, symbol.get(version[3], version[3]), version[4])
