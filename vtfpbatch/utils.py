"""Helpful utilities for working with targets files and their directories.
"""
import os
import time


def safe_makedir(dname):
    """Make a directory if it doesn't exist, handling concurrent race conditions.
    """
    if not dname:
        return dname
    num_tries = 0
    max_tries = 5
    while not os.path.exists(dname):
        try:
            os.makedirs(dname)
        except OSError:
            if num_tries > max_tries:
                raise
            num_tries += 1
            time.sleep(2)
    return dname

def remove_safe(f):
    try:
        if os.path.isdir(f):
            os.rmdir(f)
        else:
            os.remove(f)
    except OSError:
        pass

def grandparent(path):
    """Directory two levels above path, "." when path has no parent directories.

    example: grandparent("Homo_sapiens/GRCh38/fasta/genome.fa") -> "Homo_sapiens/GRCh38"
    example: grandparent("genome.fa") -> "."
    """
    out = os.path.dirname(os.path.dirname(path.rstrip("/")))
    if not out:
        return "/" if path.startswith("/") else "."
    return out

def which(program, env=None):
    """ returns the path to an executable or None if it can't be found"""
    if env is None:
        env = os.environ.copy()

    def is_exe(fpath):
        return os.path.isfile(fpath) and os.access(fpath, os.X_OK)

    fpath, fname = os.path.split(program)
    if fpath:
        if is_exe(program):
            return program
    else:
        for path in env.get("PATH", "").split(os.pathsep):
            exe_file = os.path.join(path, program)
            if is_exe(exe_file):
                return exe_file
    return None
