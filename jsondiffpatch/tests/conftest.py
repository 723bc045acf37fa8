# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from jsondiffpatch.patch_format import schema_path


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    import shutil
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture(scope='session')
def patch_schema():
    with io.open(schema_path, encoding="utf8") as f:
        schema = json.load(f)
    Validator.check_schema(schema)
    return schema


@fixture(scope='session')
def patch_validator(patch_schema):
    return Validator(patch_schema)


@fixture
def reset_log_level():
    """Restore the package and root log levels after a test"""
    import logging
    from jsondiffpatch.log import logger
    old_level = logger.level
    old_root = logging.getLogger().level
    yield
    logger.setLevel(old_level)
    logging.getLogger().setLevel(old_root)


def _load_rfc_cases():
    with io.open(pjoin(testspath(), "files", "rfc6902_examples.json"), encoding="utf8") as f:
        return json.load(f)


def pytest_generate_tests(metafunc):
    if 'rfc_case' in metafunc.fixturenames:
        cases = _load_rfc_cases()
        metafunc.parametrize(
            'rfc_case', cases, ids=[c['comment'] for c in cases])
