#!/usr/bin/env python
import sys
import unittest


def run(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    cov = None
    if '--coverage' in args:
        import coverage
        args.remove('--coverage')
        cov = coverage.Coverage(source=['sofa'])
        cov.start()
    result = runtests(args)
    if cov:
        cov.stop()
        cov.save()
        cov.report()
    sys.exit(not result.wasSuccessful())


def runtests(args):
    from sofa.utils.config import Config

    cfg = Config(description='Sofa asynchronous test suite')
    unknown = cfg.parse_command_line(args)
    cfg.configured_logger()
    loader = unittest.TestLoader()
    if unknown:
        suite = loader.loadTestsFromNames(unknown)
    else:
        suite = loader.discover('tests', top_level_dir='.')
    return unittest.TextTestRunner(verbosity=2).run(suite)


if __name__ == '__main__':
    run()
