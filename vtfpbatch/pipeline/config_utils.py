"""Loads configurations from .yaml files and expands environment variables.

Also locates the vtfp executable, either from an alternative P4
installation pointed to by P4_PATH or from the installed version on PATH.
"""
import copy
import os

import toolz as tz
import yaml

from vtfpbatch import utils
from vtfpbatch.errors import BatchError
from vtfpbatch.log import logger

DEFAULT_REPOSITORY = "/lustre/scratch117/core/sciops_repository"

DEFAULTS = {
    "repository": DEFAULT_REPOSITORY,
    "resources": {
        "vtfp": {"cmd": "vtfp.pl"},
        "bwa": {"cmd": "bwa0_6"},
        "samtools": {"cmd": "samtools"},
        "star": {"cmd": "star"},
    },
    "jars": {
        "alignment_filter": "/software/solexa/pkg/illumina2bam/1.19/AlignmentFilter.jar",
        "alignment_filter_hs": "/software/solexa/pkg/illumina2bam/1.17/AlignmentFilter.jar",
        "split_bam_by_chromosomes": "/software/solexa/pkg/illumina2bam/1.17/SplitBamByChromosomes.jar",
    },
    "threads": {"aligner": 16, "br": 7, "b2c": 7, "s2b": 7},
    "sjdb_overhang": 74,
    "phix_fasta": "PhiX/Sanger-SNPs/all/fasta/phix_unsnipped_short_no_N.fa",
    "prune_nodes": "fop.*samtools_stats_F0.*00_bait.*-",
}


class CmdNotFound(BatchError):
    pass

# ## Generalized configuration

def load_system_config(config_file=None):
    """Load a vtfp system YAML configuration, filling in standard defaults.

    Missing keys fall back to the production locations, so running without a
    configuration file gives the standard setup.
    """
    config = copy.deepcopy(DEFAULTS)
    if config_file:
        if not os.path.exists(config_file):
            raise BatchError("Could not find input system configuration file %s" % config_file)
        config = _merge(config, load_config(config_file))
        config["vtfp_system"] = os.path.abspath(config_file)
    return config

def load_config(config_file):
    """Load YAML config file, replacing environmental variables.
    """
    with open(config_file) as in_handle:
        config = yaml.safe_load(in_handle) or {}
    return _expand_paths(config)

def _merge(base, update):
    out = copy.deepcopy(base)
    for k, v in update.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out

def _expand_paths(config):
    for field, setting in config.items():
        if isinstance(config[field], dict):
            config[field] = _expand_paths(config[field])
        else:
            config[field] = expand_path(setting)
    return config

def expand_path(path):
    """ Combines os.path.expandvars with replacing ~ with $HOME.
    """
    try:
        return os.path.expandvars(path.replace("~", "$HOME"))
    except AttributeError:
        return path

# ## Retrieval functions

def get_repository(config):
    return config.get("repository") or DEFAULT_REPOSITORY

def get_jar(name, config):
    return tz.get_in(["jars", name], config, DEFAULTS["jars"][name])

def get_threads(name, config):
    return tz.get_in(["threads", name], config, DEFAULTS["threads"][name])

def get_program(name, config, default=None):
    """Retrieve the command name of a program from the configuration.

    Programs passed to vtfp are looked up on the compute nodes running the
    final pipeline, so these are returned as configured without checking PATH.
    """
    pconfig = tz.get_in(["resources", name], config)
    if pconfig is None:
        return default or name
    elif isinstance(pconfig, str):
        return pconfig
    elif "cmd" in pconfig:
        return pconfig["cmd"]
    elif default is not None:
        return default
    else:
        return name

def get_vtfp(config, method, environ=None):
    """Locate the vtfp executable and the P4 installation it belongs to.

    Returns a (executable, p4_path) tuple. An alternative installation in
    P4_PATH always wins; otherwise the installed vtfp on PATH is used, except
    for methods only available from a development P4 checkout.
    """
    environ = os.environ if environ is None else environ
    p4_path = environ.get("P4_PATH")
    if p4_path:
        logger.info("Using P4_PATH=%s" % p4_path)
        return os.path.join(p4_path, "bin", "vtfp.pl"), p4_path
    if method == "bam2cram":
        raise CmdNotFound("Not P4_PATH env variable: try 'export P4_PATH=/path/to/p4'")
    cmd = get_program("vtfp", config, "vtfp.pl")
    found = cmd if os.path.isabs(cmd) else utils.which(cmd, env=environ)
    if not found or not os.path.exists(found):
        raise CmdNotFound("Could not find %s on PATH: set P4_PATH to a P4 installation" % cmd)
    binary = os.path.realpath(found)
    return binary, binary.rsplit("/bin", 1)[0]

def get_default_cfgdatadir(p4_path):
    return os.path.join(p4_path, "data", "vtlib")
