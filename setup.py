#!/usr/bin/env python
import os

from setuptools import setup, find_packages

import sofa


def read(name):
    filename = os.path.join(os.path.dirname(__file__), name)
    with open(filename) as fp:
        return fp.read()


def requirements(name):
    install_requires = []
    dependency_links = []

    for line in read(name).split('\n'):
        if line.startswith('-e '):
            link = line[3:].strip()
            if link == '.':
                continue
            dependency_links.append(link)
            line = link.split('=')[1]
        line = line.strip()
        if line and not line.startswith('#'):
            install_requires.append(line)

    return install_requires, dependency_links


meta = dict(
    name='sofa',
    version=sofa.__version__,
    description=sofa.__doc__,
    license="BSD",
    long_description=read('README.rst'),
    include_package_data=True,
    install_requires=requirements('requirements/hard.txt')[0],
    extras_require={
        'test': requirements('requirements/test.txt')[0]
    },
    python_requires='>=3.8',
    packages=find_packages(include=['sofa', 'sofa.*']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules']
)


if __name__ == '__main__':
    setup(**meta)
