# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import os
import shutil

from pytest import fixture

import docdelta.log
from docdelta.utils import read_document


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def base_doc(filespath):
    return read_document(pjoin(filespath, "base.json"))


@fixture
def remote_doc(filespath):
    return read_document(pjoin(filespath, "remote.json"))


@fixture
def reset_log():
    # Restore docdelta log level after test
    l = docdelta.log.logger
    curlevel = l.getEffectiveLevel()
    try:
        yield
    finally:
        l.setLevel(curlevel)
        logging.getLogger().setLevel(logging.WARNING)
