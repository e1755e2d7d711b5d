"""Assemble vtfp command lines to generate P4 json workflow descriptions.

The command is kept as an ordered list of key/value parameters and only
turned into vtfp arguments when it is run, so method-specific parameters
can be inspected independently of any executable.
"""
from collections import namedtuple
import os
import shlex

from vtfpbatch.errors import BatchError
from vtfpbatch.methods import bwa, salmon, split, star, tophat
from vtfpbatch.log import logger
from vtfpbatch.pipeline import config_utils

# Define a vtfp method to plugin:
# group -- "alignment" methods share bwa, samtools and reference parameters,
#  "salmon" methods only quantify
# prepare_fn -- adjusts the targets record before parameters are built
# args_fn -- method specific (key, value) parameters
# template_fn -- default template when none is given with -t
# alignment_method -- aligner reported to the templates, when not the method itself
VtfpMethod = namedtuple("VtfpMethod", ["group", "prepare_fn", "args_fn",
                                       "template_fn", "alignment_method"])

def _no_args(record, config):
    return []

def _bam2cram_args(record, config):
    raise BatchError("-M: option bam2cram not supported for now: bam2cram")

METHODS = {
    "bwa_aln": VtfpMethod("alignment", None, _no_args, bwa.template, None),
    "bwa_mem": VtfpMethod("alignment", None, _no_args, bwa.template, None),
    "tophat2": VtfpMethod("alignment", None, tophat.tophat_args, bwa.template, None),
    "star": VtfpMethod("alignment", star.prepare, star.star_args, bwa.template, None),
    "hs_split": VtfpMethod("alignment", None, split.hs_split_args, split.hs_split_template, "bwa_mem"),
    "y_split": VtfpMethod("alignment", None, split.y_split_args, bwa.template, "bwa_mem"),
    "salmon": VtfpMethod("salmon", None, salmon.salmon_args, salmon.template, None),
    "bam2salmon": VtfpMethod("salmon", None, salmon.quant_args, salmon.template, None),
    "bam2cram": VtfpMethod("unsupported", None, _bam2cram_args, None, None)}

REQUIRED_FIELDS = {"alignment": ["align_ref_genome", "ref_dict_name", "ref_fasta_name"],
                   "salmon": ["transcriptome", "transcript_anno"],
                   "unsupported": []}


class VtfpCommand(object):
    """Ordered vtfp parameters for a single sample.
    """
    def __init__(self, executable, log_file, out_json, verbosity=3):
        self.executable = executable
        self.log_file = log_file
        self.out_json = out_json
        self.verbosity = verbosity
        self.params = []
        self.extra_args = []
        self.prune_nodes = None
        self.export_param_vals = None
        self.template = None

    def extend(self, params):
        for key, val in params:
            self.params.append((key, val))

    def get(self, key):
        """All values given for key, in command order.
        """
        return [v for k, v in self.params if k == key]

    def to_cmd(self):
        cmd = [self.executable, "-l", self.log_file, "-ve", str(self.verbosity),
               "-o", self.out_json]
        for key, val in self.params:
            if val is None:
                cmd += ["-nullkeys", key]
            else:
                cmd += ["-keys", key, "-vals", str(val)]
        cmd += self.extra_args
        if self.prune_nodes:
            cmd += ["-prune_nodes", self.prune_nodes]
        if self.export_param_vals:
            cmd += ["-export_param_vals", self.export_param_vals]
        if self.template:
            cmd.append(self.template)
        return cmd

    def __str__(self):
        return " ".join(self.to_cmd())


def get_method(method):
    try:
        return METHODS[method]
    except KeyError:
        raise BatchError("-M: option not supported: %s" % method)

def resolve_template(template, p4_path):
    """Split a -t value into a (config data directory, template file) pair.

    A directory replaces the default template library; a file is used as the
    template for every sample.
    """
    cfgdatadir, template_file = None, None
    if template and os.path.isdir(template):
        cfgdatadir = template
    elif template and os.path.isfile(template):
        template_file = template
    elif template:
        logger.warning("-t: Cannot access %s: using default templates" % template)
    return cfgdatadir or config_utils.get_default_cfgdatadir(p4_path), template_file

def prepare_record(record, method):
    """Apply method specific adjustments to a record, eg. STAR index locations.
    """
    tool = get_method(method)
    return tool.prepare_fn(record) if tool.prepare_fn else record

def method_args(record, method, config):
    """Method specific parameters, failing early for unusable records.
    """
    return get_method(method).args_fn(record, config)

def split_extra_args(extra_args):
    """Split the quoted -x string into vtfp arguments.
    """
    try:
        return shlex.split(extra_args) if extra_args else []
    except ValueError as e:
        raise BatchError("-x: cannot parse extra arguments [ %s ]: %s" % (extra_args, e))

def build_command(record, method, dirs, src_format, executable, cfgdatadir, config,
                  template=None, extra_args=None, params=None):
    """Build the vtfp command for a record with resolved directories.

    params are previously computed method_args; they are built here if
    not supplied. extra_args is the already split -x argument list.
    """
    tool = get_method(method)
    if params is None:
        params = method_args(record, method, config)
    cmd = VtfpCommand(executable,
                      os.path.join(dirs.json, "vtfp_%s_%s.log" % (record.sample_id, method)),
                      os.path.join(dirs.json, "%s_%s.json" % (record.sample_id, method)))
    cmd.extend([("rpt", record.sample_id),
                ("src_input_ext", src_format),
                ("src_input_format", src_format),
                ("outdatadir", dirs.output),
                ("indatadir", dirs.input),
                ("cfgdatadir", cfgdatadir)])
    if tool.group == "alignment":
        alignment_method = tool.alignment_method or method
        cmd.extend(bwa.alignment_args(record, alignment_method, config))
        cmd.extend(params)
        cmd.extend(bwa.bwa_args(record, config))
        cmd.prune_nodes = bwa.prune_nodes(extra_args, config)
        cmd.export_param_vals = bwa.export_param_vals(dirs.json, record, alignment_method)
    elif tool.group == "salmon":
        cmd.extend(params)
        cmd.export_param_vals = os.path.join(dirs.json, "%s_p4_%s_pv_out.json" % (record.sample_id, method))
    else:
        raise BatchError("-M: option not supported: %s" % method)
    cmd.extra_args = list(extra_args or [])
    cmd.template = template or tool.template_fn(record, method, cfgdatadir)
    return cmd
