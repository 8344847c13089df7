import getpass
import os

import nox

nox.options.envdir = f'./.nox-{getpass.getuser()}'
nox.options.sessions = ['linter', 'unit']

PYTHON_VERSIONS = ['3.9', '3.10', '3.11', '3.12', '3.13', '3.14']


def pytest_options(session, module):
    '''Return pytest command line.

    Extra arguments after `--` are passed to pytest as is::

        nox -e unit -- -k diagnostics --timeout=10
    '''
    return [
        'python',
        '-m',
        'pytest',
        '-rx',
        '--timeout=60',
        '--basetemp',
        './log',
        '--verbose',
        *session.posargs,
        module,
    ]


def setup_venv_dev(session):
    session.install('--upgrade', 'pip')
    session.install('.[dev]')
    tmpdir = os.path.abspath(session.create_tmp())
    session.run('cp', '-a', 'tests', tmpdir, external=True)
    session.chdir(f'{tmpdir}/tests')
    return tmpdir


@nox.session(python=PYTHON_VERSIONS)
def linter(session):
    '''Run code checks and linters.'''
    session.install('flake8')
    session.run(
        'python',
        '-m',
        'flake8',
        '--extend-ignore=E203,W503',
        'pyqsfpdd',
        'tests',
        'noxfile.py',
    )


@nox.session(python=PYTHON_VERSIONS)
def unit(session):
    '''Run unit tests.'''
    setup_venv_dev(session)
    session.run(*pytest_options(session, 'test_unit'))
