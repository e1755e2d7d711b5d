"""Exceptions raised while building and running vtfp commands.

Fatal problems stop the whole batch and carry the exit code the
command line should finish with. Row problems are reported and the
batch continues with the next targets line.
"""


class BatchError(Exception):
    """Fatal problem; terminates the batch."""
    exitcode = 1


class MissingDirectoryError(BatchError, IOError):
    """A required input or json directory cannot be accessed."""
    exitcode = 2


class RowError(ValueError):
    """Problem confined to a single targets line."""
