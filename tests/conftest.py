"""Pytest fixtures and test helper functions"""

import os
import stat

import pytest

from tests.unit.data import RUN, SAMPLE_ID

SILENT_VTFP = "#!/bin/sh\nexit 0\n"


def write_vtfp(p4_path, content=SILENT_VTFP):
    """Install a stand-in vtfp.pl under p4_path/bin.
    """
    bin_dir = os.path.join(p4_path, "bin")
    os.makedirs(bin_dir, exist_ok=True)
    vtfp_file = os.path.join(bin_dir, "vtfp.pl")
    with open(vtfp_file, "w") as out_handle:
        out_handle.write(content)
    os.chmod(vtfp_file, os.stat(vtfp_file).st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return vtfp_file


@pytest.fixture
def p4_path(tmp_path):
    """P4 installation with a vtfp.pl that succeeds silently"""
    path = str(tmp_path / "p4")
    write_vtfp(path)
    os.makedirs(os.path.join(path, "data", "vtlib"))
    return path


@pytest.fixture
def environ(p4_path):
    return {"P4_PATH": p4_path, "PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def work_dir(tmp_path):
    """Working directory laid out for a bwa_mem run of the test sample"""
    work = tmp_path / "work"
    for d in [os.path.join("input", RUN),
              os.path.join("output", "bwa_mem", RUN, SAMPLE_ID),
              os.path.join("staging", "bwa_mem", RUN, SAMPLE_ID),
              "json"]:
        os.makedirs(str(work / d))
    return str(work)


@pytest.fixture
def cram_file(work_dir):
    fname = os.path.join(work_dir, "input", RUN, "%s.cram" % SAMPLE_ID)
    with open(fname, "w") as out_handle:
        out_handle.write("")
    return fname
