"""Centralize running of external commands, providing logging and tracking.
"""
import shlex
import subprocess

from vtfpbatch.log import logger, logger_cl


def run(cmd, descr=None, env=None):
    """Run the provided command, logging it and capturing its combined output.

    Blocks until the command exits. Returns the exit code together with
    everything written to standard output and standard error.
    """
    if descr:
        logger.debug(descr)
    logger_cl.debug(" ".join(shlex.quote(str(x)) for x in cmd))
    return _do_run(cmd, env=env)

def _do_run(cmd, env=None):
    """Perform running, collecting output and exit status.
    """
    cmd = [str(x) for x in cmd]
    try:
        s = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            close_fds=True,
            env=env,
        )
    except OSError as e:
        return 127, "%s: %s" % (cmd[0], e)
    stdout, _ = s.communicate()
    output = stdout.decode("utf-8", errors="replace")
    for line in output.splitlines():
        if line.rstrip():
            logger.debug(line.rstrip())
    return s.returncode, output
