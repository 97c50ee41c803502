'''Logging configuration.

Loggers of the ``sofa`` namespace are configured with
:func:`logging.config.dictConfig` from :data:`LOGGING_CONFIG`, usually via
:meth:`.Config.configured_logger`.
'''
import logging
from copy import deepcopy
from logging.config import dictConfig
from threading import Lock


LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': ('%(asctime)s [p=%(process)s, %(levelname)s,'
                       ' %(name)s] %(message)s'),
            'datefmt': '%H:%M:%S'
        },
        'simple': {
            'format': '%(asctime)s %(levelname)s %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'level_message': {'format': '%(levelname)s - %(message)s'},
        'message': {'format': '%(message)s'}
    },
    'handlers': {
        'silent': {
            'class': 'sofa.utils.log.Silence'
        },
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose'
        },
        'console_message': {
            'class': 'logging.StreamHandler',
            'formatter': 'message'
        },
        'console_level_message': {
            'class': 'logging.StreamHandler',
            'formatter': 'level_message'
        }
    },
    'loggers': {
        'asyncio': {
            'level': 'WARNING'
        }
    }
}

_lock = Lock()
# base dictionary and names of configured loggers
_state = {'config': None, 'names': set()}


class Silence(logging.Handler):
    '''A handler which drops all records'''
    def emit(self, record):
        pass


def clear_logger():
    '''Forget loggers configured via :func:`configured_logger`.'''
    with _lock:
        _state['config'] = None
        _state['names'].clear()


def configured_logger(name=None, config=None, level=None, handlers=None):
    '''Configure the logger ``name``, the root logger if not given.

    The configuration dictionary, :data:`LOGGING_CONFIG` by default, is
    fixed by the first call. A logger is configured the first time it is
    requested only, later calls return it unchanged.

    :param level: level name or number, ``None`` and ``'none'`` silence
        the logger.
    :param handlers: names of handlers of the configuration dictionary.
    '''
    name = name or ''
    with _lock:
        if name in _state['names']:
            return logging.getLogger(name)
        if _state['config'] is None:
            _state['config'] = deepcopy(config or LOGGING_CONFIG)
        config = deepcopy(_state['config'])

        level = get_level(level)
        if level == logging.NOTSET:
            handlers = ['silent']

        loggers = config.pop('loggers', {})
        if name:
            logger = loggers.get(name, {})
            logger['propagate'] = False
            config.pop('root', None)
            config['loggers'] = {name: logger}
        else:
            logger = config.get('root') or {}
            logger.setdefault('handlers', ['console'])
            config['root'] = logger
            config['loggers'] = loggers
        logger['level'] = logging.getLevelName(level)
        if handlers:
            logger['handlers'] = list(handlers)

        dictConfig(config)
        _state['names'].add(name)
        return logging.getLogger(name)


def get_level(level):
    '''Numeric logging level from a level name or number'''
    try:
        return int(level)
    except TypeError:
        return logging.NOTSET
    except ValueError:
        lv = str(level).upper()
        if lv == 'NONE':
            return logging.NOTSET
        value = logging.getLevelName(lv)
        if isinstance(value, int):
            return value
        raise ValueError('Unknown log level "%s"' % level) from None
