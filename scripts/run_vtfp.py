#!/usr/bin/env python -Es
"""Generate P4 json workflow descriptions with vtfp for every line of a targets file.

Targets lines are read from standard input, tab separated:

  <id> <run> <position> <tag> <aligned> <alignment reference> <reference dict>
  <reference fasta> <transcriptome> <annotation> <library type> <library layout>
  <reference transcript fasta>

Usage:
  run_vtfp.py -M <METHOD> [options] < targets_file.txt

Set P4_PATH to use an alternative P4 installation instead of the vtfp.pl
found on PATH.
"""
import sys

from vtfpbatch.clargs import parse_cl_args
from vtfpbatch.pipeline.main import run_main

def main(**kwargs):
    return run_main(sys.stdin, **kwargs)

if __name__ == "__main__":
    kwargs = parse_cl_args(sys.argv[1:])
    sys.exit(main(**kwargs))
