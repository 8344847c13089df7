#!/usr/bin/env python
import re

from setuptools import setup

readme = open("README.md", "r")
with open("pyqsfpdd/config/version.py", "r") as f:
    release = re.search(r"__version__ = '([^']+)'", f.read()).group(1)


setup(name='pyqsfpdd',
      version=release,
      description='QSFP-DD module memory decoder',
      url='https://github.com/pyqsfpdd/pyqsfpdd',
      license='Apache v2',
      packages=['pyqsfpdd',
                'pyqsfpdd.config',
                'pyqsfpdd.decoder',
                'pyqsfpdd.eeprom'],
      entry_points={
          'console_scripts': [
              'pyqsfpdd-decoder = pyqsfpdd.decoder.main:run',
          ],
      },
      python_requires='>=3.9',
      install_requires=[],
      extras_require={'dev': ['pytest', 'pytest-timeout', 'nox']},
      classifiers=['License :: OSI Approved :: Apache Software License',
                   'Programming Language :: Python',
                   'Topic :: Software Development :: Libraries :: ' +
                   'Python Modules',
                   'Topic :: System :: Networking',
                   'Topic :: System :: Hardware',
                   'Operating System :: POSIX :: Linux',
                   'Intended Audience :: Developers',
                   'Intended Audience :: System Administrators',
                   'Intended Audience :: Telecommunications Industry',
                   'Programming Language :: Python :: 3',
                   'Development Status :: 4 - Beta'],
      long_description=readme.read(),
      long_description_content_type='text/markdown')
