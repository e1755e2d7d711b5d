import os

import pytest

from vtfpbatch import utils


@pytest.mark.parametrize('path, expected', [
    ('genome/fasta/foo.fa', 'genome'),
    ('/abs/genome/fasta/foo.fa', '/abs/genome'),
    ('fasta/foo.fa', '.'),
    ('foo.fa', '.'),
    ('/foo.fa', '/'),
])
def test_grandparent(path, expected):
    assert utils.grandparent(path) == expected


def test_safe_makedir(tmp_path):
    d = str(tmp_path / 'a' / 'b')
    assert utils.safe_makedir(d) == d
    assert os.path.isdir(d)


def test_which_finds_executables_only(tmp_path):
    exe = tmp_path / 'tool'
    exe.write_text('#!/bin/sh\n')
    assert utils.which('tool', env={'PATH': str(tmp_path)}) is None
    os.chmod(str(exe), 0o755)
    assert utils.which('tool', env={'PATH': str(tmp_path)}) == str(exe)
