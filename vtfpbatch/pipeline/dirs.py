"""Resolve the directories a vtfp run reads from and writes to.

Three layouts are supported: reanalysis (input/<run>, output and staging
per method/run/sample), runfolder (no_cal lanes with a numbered archive
tmp directory) and the default, where each directory can be given
explicitly.
"""
from collections import namedtuple
import os

from vtfpbatch.errors import BatchError, MissingDirectoryError
from vtfpbatch.log import logger

PathSet = namedtuple("PathSet", ["input", "output", "staging", "json"])

METHOD_HINTS = ["runfolder", "reanalysis"]
SOURCE_FORMATS = ["cram", "bam", "sam"]

def get_relative_dirs(record, method, method_hint=None, tmp_num=None, overrides=None):
    """Directories for a targets record, relative to the working directory.
    """
    if overrides is None: overrides = {}
    run, sample = record.run, record.sample_id
    if method_hint == "reanalysis":
        return PathSet(os.path.join("input", run),
                       os.path.join("output", method, run, sample),
                       os.path.join("staging", method, run, sample),
                       "json")
    elif method_hint == "runfolder":
        if tmp_num is None or str(tmp_num) == "":
            raise BatchError("-n: a numeric value is required for -n when -m runfolder "
                             "is being used (numbers in tmp_XXXXXX directory)")
        lane = "lane%s" % record.position
        tmp_dir = os.path.join("no_cal", "archive", "tmp_%s" % tmp_num, sample)
        return PathSet(os.path.join("no_cal", lane),
                       os.path.join("no_cal", "archive", lane),
                       tmp_dir, tmp_dir)
    elif method_hint:
        raise BatchError("-m: invalid method hint %s" % method_hint)
    else:
        return PathSet(overrides.get("input") or os.path.join("input", run),
                       overrides.get("output") or os.path.join("output", method, run, sample),
                       overrides.get("staging") or os.path.join("staging", method, run, sample),
                       overrides.get("json") or "json")

def resolve_dirs(record, method, work_dir, method_hint=None, tmp_num=None, overrides=None):
    """Absolute directories for a record, joined onto the working directory.
    """
    rel = get_relative_dirs(record, method, method_hint, tmp_num, overrides)
    return PathSet(*[os.path.join(work_dir, d) for d in rel])

def check_dirs(dirs):
    """Check directories exist, in the order json, output, input, staging.

    json and input must be there before vtfp runs. output and staging are
    only warned about, since they may be created by the final pipeline.
    """
    for name, required in [("json", True), ("output", False),
                           ("input", True), ("staging", False)]:
        d = getattr(dirs, name)
        if not os.path.isdir(d):
            if required:
                raise MissingDirectoryError("Cannot access %s: No such directory" % d)
            logger.warning("Cannot access %s: No such directory" % d)
    return dirs

def detect_source_format(input_dir, sample_id):
    """Extension of the first existing <sample_id>.cram, .bam or .sam file.
    """
    base = os.path.join(input_dir, sample_id)
    for ext in SOURCE_FORMATS:
        if os.path.exists("%s.%s" % (base, ext)):
            return ext
    raise BatchError("%s: No bam or cram or sam file was found in %s/\n"
                     "Use option -i to specify an input directory relative to the "
                     "working directory" % (sample_id, input_dir))
