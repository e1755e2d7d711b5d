"""Utility functionality for logging.
"""
import os
import sys

import logbook

from vtfpbatch import utils

LOG_NAME = "vtfp-batch"

logger = logbook.Logger(LOG_NAME)
logger_cl = logbook.Logger(LOG_NAME + "-commands")
logger_stdout = logbook.Logger(LOG_NAME + "-stdout")

def get_log_dir(config):
    return config.get("log_dir")

def _is_cl(record, _):
    return record.channel == LOG_NAME + "-commands"

def _is_stdout(record, _):
    return record.channel == LOG_NAME + "-stdout"

def _not_cl(record, handler):
    return not _is_cl(record, handler) and not _is_stdout(record, handler)

class CloseableNestedSetup(logbook.NestedSetup):
    def close(self):
        for obj in self.objects:
            if hasattr(obj, "close"):
                obj.close()

def _create_log_handler(config, debug=False):
    handlers = [logbook.NullHandler()]
    format_str = "[{record.level_name}] {record.message}"
    file_format_str = "[{record.time:%Y-%m-%dT%H:%M}] " + format_str

    log_dir = get_log_dir(config)
    if log_dir:
        utils.safe_makedir(log_dir)
        handlers.append(logbook.FileHandler(os.path.join(log_dir, "%s.log" % LOG_NAME),
                                            format_string=file_format_str, level="INFO",
                                            filter=_not_cl, bubble=True))
        handlers.append(logbook.FileHandler(os.path.join(log_dir, "%s-debug.log" % LOG_NAME),
                                            format_string=file_format_str, level="DEBUG",
                                            bubble=True))
    handlers.append(logbook.StreamHandler(sys.stdout, format_string="{record.message}",
                                          level="DEBUG", filter=_is_stdout))
    handlers.append(logbook.StreamHandler(sys.stderr, format_string=format_str,
                                          level="DEBUG" if debug else "INFO",
                                          filter=_not_cl, bubble=True))
    return CloseableNestedSetup(handlers)

def setup_local_logging(config=None, debug=False):
    """Setup logging for a batch, directing messages to stderr, stdout and log files.
    """
    if config is None: config = {}
    handler = _create_log_handler(config, debug)
    handler.push_application()
    return handler

def command_log_handler(log_file):
    """Handler appending issued commands, one per line, to log_file.
    """
    return logbook.FileHandler(log_file, mode="a", format_string="{record.message}",
                               level="DEBUG", filter=_is_cl, bubble=True)
