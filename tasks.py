#!/usr/bin/env python3
"""Tasks file used by the *invoke* command.

This simplifies some common development tasks.

Run these tasks with the `invoke` tool.
"""

from __future__ import annotations

import sys
import os
import shutil
import getpass
from glob import glob

import keyring
import semver
from setuptools_scm import get_version
from invoke import task, run, Exit

PYTHONBIN = os.environ.get("PYTHONBIN", sys.executable)
# Put the path in quotes in case there is a space in it.
PYTHONBIN = f'"{PYTHONBIN}"'

PACKAGE = "droidbuild"

# Putting pypi info here eliminates the need for user-private ~/.pypirc file.
PYPI_HOST = "upload.pypi.org"
PYPI_URL = f"https://{PYPI_HOST}/legacy/"
PYPI_USER = "__token__"


@task
def info(ctx):
    """Show information about the current Python and environment."""
    print(f"Python being used: {PYTHONBIN}")
    print(f"Package version: {get_version()}")
    venv = os.environ.get("VIRTUAL_ENV")
    if venv:
        print("Virtual environment:", venv)


@task
def flake8(ctx, pathname=PACKAGE):
    """Run flake8 linter on the package."""
    ctx.run(f"{PYTHONBIN} -m flake8 {pathname}")


@task
def format(ctx, pathname=PACKAGE, check=False):
    """Run yapf formatter on the specified file, or recurse into directory."""
    option = "-d" if check else "-i"
    recurse = "--recursive" if os.path.isdir(pathname) else ""
    ctx.run(f"{PYTHONBIN} -m yapf --style setup.cfg {option} {recurse} {pathname}")


@task
def set_pypi_token(ctx):
    """Set the token in the local key ring."""
    pw = getpass.getpass("Enter pypi token? ")
    if pw:
        keyring.set_password(PYPI_HOST, PYPI_USER, pw)
    else:
        raise Exit("No password entered.", 3)


@task
def dev_requirements(ctx):
    """Install development requirements."""
    ctx.run(f"{PYTHONBIN} -m pip install -r dev-requirements.txt")


@task(pre=[dev_requirements])
def develop(ctx, uninstall=False):
    """Start developing in editable mode."""
    if uninstall:
        ctx.run(f"{PYTHONBIN} -m pip uninstall -y {PACKAGE}")
    else:
        ctx.run(f'{PYTHONBIN} -m pip install -e ".[test]"')


@task
def clean(ctx):
    """Clean out build and cache files."""
    ctx.run(r"find . -depth -type d -name __pycache__ -exec rm -rf {} \;")
    ctx.run("rm -rf build *.egg-info .pytest_cache")


@task
def cleandist(ctx):
    """Clean out dist subdirectory."""
    if os.path.isdir("dist"):
        shutil.rmtree("dist", ignore_errors=True)
        os.mkdir("dist")


@task
def test(ctx, testfile=None, ls=False):
    """Run unit tests. Use ls option to only list them."""
    if ls:
        ctx.run(f"{PYTHONBIN} -m pytest --collect-only -qq tests")
    elif testfile:
        ctx.run(f"{PYTHONBIN} -m pytest -s {testfile}")
    else:
        ctx.run(f"{PYTHONBIN} -m pytest tests", hide=False, in_stream=False)


@task
def tag(ctx, tag=None, major=False, minor=False, patch=False):
    """Tag or bump release with a semver tag."""
    latest = None
    if tag is None:
        tags = get_tags()
        latest = tags[-1] if tags else semver.VersionInfo(0, 0, 0)
        if minor:
            nextver = latest.bump_minor()
        elif major:
            nextver = latest.bump_major()
        else:
            nextver = latest.bump_patch()
    else:
        if tag.startswith("v"):
            tag = tag[1:]
        try:
            nextver = semver.VersionInfo.parse(tag)
        except ValueError:
            raise Exit("Invalid semver tag.", 2)

    print(latest, "->", nextver)
    ctx.run(f'git tag -a -m "Release v{nextver}" v{nextver}')


@task(cleandist)
def sdist(ctx):
    """Build source distribution."""
    ctx.run(f"{PYTHONBIN} -m build --sdist")


@task(sdist)
def bdist(ctx):
    """Build a standard wheel file, an installable format."""
    ctx.run(f"{PYTHONBIN} -m build --wheel")


@task(pre=[bdist])
def publish(ctx):
    """Publish built wheel file to package repo."""
    token = get_pypi_token()
    distfiles = glob("dist/*.whl")
    distfiles.extend(glob("dist/*.tar.gz"))
    if not distfiles:
        raise Exit("Nothing in dist folder!")
    distfiles = " ".join(distfiles)
    ctx.run(f'{PYTHONBIN} -m twine upload --repository-url \"{PYPI_URL}\" '
            f'--username {PYPI_USER} --password {token} {distfiles}')


# Helper functions follow.
def get_tags():
    rv = run('git tag -l "v*"', hide="out")
    vilist = []
    for line in rv.stdout.split():
        try:
            vi = semver.VersionInfo.parse(line[1:])
        except ValueError:
            pass
        else:
            vilist.append(vi)
    vilist.sort()
    return vilist


def get_pypi_token():
    cred = keyring.get_credential(PYPI_HOST, PYPI_USER)
    if not cred:
        raise Exit("You must set the pypi token with the set-pypi-token target.", 1)
    return cred.password
