"""Method specific vtfp parameters: aligners, splitters and quantifiers.

Each module provides functions returning ordered (key, value) pairs that
become `-keys key -vals value` on the vtfp command line. A value of None
is passed as `-nullkeys key`.
"""
import os

from vtfpbatch.pipeline import config_utils

NO_TRANSCRIPTOME = "NoTranscriptome"

def reference_path(name, config):
    return os.path.join(config_utils.get_repository(config), "references", name)

def transcriptome_path(name, config):
    """Full or relative transcriptome paths are both accepted.
    """
    if os.path.isabs(name):
        return name
    return os.path.join(config_utils.get_repository(config), "transcriptomes", name)
