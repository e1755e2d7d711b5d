"""Parsing of command line arguments into run_main inputs.
"""
import argparse
import os
import shlex
import sys

from vtfpbatch.pipeline import dirs, version, vtfp

DESCRIPTION = """Generate VTFP json files using the information provided by a targets file.

Output, input, json and staging directories are defined relative to ./ or a
working directory provided by -w, and if -m runfolder or -m reanalysis is
used, their values are generated and -i/-j/-o/-s are ignored."""


class VtfpArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with 1, matching fatal batch errors.
    """
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, "[ERROR] %s\n" % message)


def _digits(value):
    if not value.isdigit():
        raise argparse.ArgumentTypeError("not a digit: %s" % value)
    return value

def _column(value):
    value = int(_digits(value))
    if value < 1:
        raise argparse.ArgumentTypeError("columns start at 1: %s" % value)
    return value

def _extra_args(value):
    try:
        shlex.split(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError("cannot parse [ %s ]: %s" % (value, e))
    return value

def add_arguments(parser):
    parser.add_argument("-M", "--method", required=True, choices=sorted(vtfp.METHODS),
                        help="Method used to build the json files")
    parser.add_argument("-c", "--column", type=_column,
                        help=("Do not use the WTSI composite id (run_position[#tag]), use "
                              "instead the contents of this column in the targets file "
                              "(must be unique)"))
    parser.add_argument("-f", "--format", choices=dirs.SOURCE_FORMATS,
                        help="Input file format. Default: auto-detect")
    parser.add_argument("-i", "--inputdir", help="Input directory. Default: ./input/<run>/")
    parser.add_argument("-j", "--jsondir", help="Output directory for json files. Default: ./json/")
    parser.add_argument("-m", "--methodhint", choices=dirs.METHOD_HINTS,
                        help="Shortcut for specific directory structures")
    parser.add_argument("-n", "--tmpnum", type=_digits,
                        help="If -m runfolder is used, numeric part of the tmp_XXXXX folder")
    parser.add_argument("-o", "--outputdir",
                        help="Output directory. Default: ./output/<method>/<run>/<run_pos#tag>/")
    parser.add_argument("-r", "--repository",
                        help="Absolute path to repository for reference genome/transcriptome")
    parser.add_argument("-s", "--stagingdir",
                        help="Staging directory. Default: ./staging/<method>/<run>/<run_pos#tag>/")
    parser.add_argument("-t", "--template",
                        help=("P4 template file or directory where templates can be located. "
                              "Default: <P4_PATH>/data/vtlib/"))
    parser.add_argument("-w", "--workdir", help="Absolute path to working directory. Default: $PWD")
    parser.add_argument("-x", "--extra", type=_extra_args,
                        help="Extra arguments passed to vtfp in a quoted string (-keys/-vals pairs)")
    parser.add_argument("--config", help="System YAML configuration file")
    parser.add_argument("-v", "--version", action="version",
                        version="%(prog)s " + version.__version__)
    return parser

def _sanity_check_args(args):
    """Ensure directory arguments exist and dependent arguments are specified.

    Returns an (error message, exit code) tuple for problems.
    """
    for flag, d in [("-w", args.workdir), ("-r", args.repository)]:
        if d:
            if not os.path.isdir(d):
                return "%s: Cannot access %s: no such directory" % (flag, d), 2
            if not os.path.isabs(d):
                return "%s: Not an absolute path" % flag, 1
    if args.methodhint == "runfolder" and args.tmpnum is None:
        return ("-n: a numeric value is required for -n when -m runfolder is being "
                "used (numbers in tmp_XXXXXX directory)"), 1
    return None, 0

def parse_cl_args(in_args):
    """Parse input commandline arguments into run_main keyword arguments.
    """
    parser = add_arguments(VtfpArgumentParser(
        description=DESCRIPTION, formatter_class=argparse.RawDescriptionHelpFormatter,
        usage="%(prog)s -M <METHOD> [options] < targets_file.txt"))
    args = parser.parse_args(in_args)
    error_msg, exitcode = _sanity_check_args(args)
    if error_msg:
        parser.exit(exitcode, "[ERROR] %s\n" % error_msg)
    overrides = {"input": args.inputdir, "output": args.outputdir,
                 "staging": args.stagingdir, "json": args.jsondir}
    return {"method": args.method,
            "work_dir": args.workdir,
            "method_hint": args.methodhint,
            "tmp_num": args.tmpnum,
            "id_column": args.column,
            "src_format": args.format,
            "overrides": {k: v for k, v in overrides.items() if v},
            "template": args.template,
            "repository": args.repository,
            "extra_args": args.extra,
            "config_file": args.config}
