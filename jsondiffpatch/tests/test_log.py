# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

import pytest

from jsondiffpatch import log
from jsondiffpatch._version import parse_version, VersionInfo


def test_set_log_level_by_name(reset_log_level):
    log.set_jsondiffpatch_log_level('ERROR', set_main=False)
    assert log.logger.level == logging.ERROR
    log.set_jsondiffpatch_log_level(logging.DEBUG)
    assert log.logger.level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    with pytest.raises(ValueError):
        log.set_jsondiffpatch_log_level('LOUD')


def test_shortcuts_use_package_logger(caplog):
    with caplog.at_level(logging.INFO, logger='jsondiffpatch'):
        log.info("applied %d operations", 3)
    assert caplog.records[-1].name == 'jsondiffpatch'
    assert caplog.records[-1].getMessage() == "applied 3 operations"


def test_parse_version():
    assert parse_version("1.2.0") == VersionInfo(1, 2, 0, "final", 0)
    assert parse_version("1.3.0rc1") == VersionInfo(1, 3, 0, "candidate", 1)
    assert parse_version("2.0.0a3") == VersionInfo(2, 0, 0, "alpha", 3)
    assert parse_version("2.0.0.dev1") == VersionInfo(2, 0, 0, "dev", 1)
    with pytest.raises(ValueError):
        parse_version("1.2")
