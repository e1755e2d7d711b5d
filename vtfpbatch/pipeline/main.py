"""Main entry point for generating vtfp json files from a targets file.

Targets lines are processed one at a time: directories are resolved and
checked, the vtfp command is built and run, and its outcome counted.
Fatal problems stop the batch; vtfp failures are counted and the batch
continues. Duplicate sample ids are only detected once all lines are
done and are counted as failures.
"""
import os

from vtfpbatch import log, utils
from vtfpbatch.errors import BatchError, RowError
from vtfpbatch.log import logger, logger_stdout
from vtfpbatch.pipeline import config_utils, dirs, targets, vtfp
from vtfpbatch.provenance import do


class BatchState(object):
    """Outcome of each processed targets line, in order.
    """
    def __init__(self):
        self.results = []
        self.json_dirs = set()

    def add(self, sample_id, ok):
        self.results.append((sample_id, ok))

    @property
    def total(self):
        return len(self.results)

    @property
    def sample_ids(self):
        return [x for x, _ in self.results if x]

    @property
    def duplicates(self):
        return len(self.sample_ids) - len(set(self.sample_ids))

    @property
    def ok(self):
        ok = len([x for x in self.results if x[1]])
        if self.duplicates:
            ok = min(ok, len(set(x for x, is_ok in self.results if is_ok and x)))
        return ok

    @property
    def failed(self):
        return len([x for x in self.results if not x[1]]) + self.duplicates

    @property
    def exitcode(self):
        return 0 if self.total == self.ok else 1

    def summary(self):
        if self.exitcode == 0:
            return "Done. [ %s ] command(s) executed successfully" % self.ok
        return "[ %s ] command(s) exited with errors%s" % (
            self.failed, " or are duplicated" if self.duplicates else "")

    def commands_log(self, json_dir, method):
        """Per json directory log of issued commands, restarted for each batch.
        """
        log_file = os.path.join(json_dir, "vtfp_commands_%s.log" % method)
        if json_dir not in self.json_dirs:
            self.json_dirs.add(json_dir)
            if os.path.exists(log_file):
                utils.remove_safe(log_file)
        return log_file


def run_main(in_handle, method, work_dir=None, method_hint=None, tmp_num=None,
             id_column=None, src_format=None, overrides=None, template=None,
             repository=None, extra_args=None, config_file=None, environ=None):
    """Generate json files for every line of a targets file.

    Returns the exit code for the batch.
    """
    handler = log.setup_local_logging()
    try:
        config = config_utils.load_system_config(config_file)
        if log.get_log_dir(config):
            handler.pop_application()
            handler.close()
            handler = log.setup_local_logging(config)
        if repository:
            config["repository"] = repository
        if method_hint == "runfolder" and tmp_num is None:
            raise BatchError("-n: a numeric value is required for -n when -m runfolder "
                             "is being used (numbers in tmp_XXXXXX directory)")
        split_args = vtfp.split_extra_args(extra_args)
        environ = dict(os.environ if environ is None else environ)
        executable, p4_path = config_utils.get_vtfp(config, method, environ)
        environ["P4_PATH"] = p4_path
        cfgdatadir, template_file = vtfp.resolve_template(template, p4_path)
        batch = {"method": method, "work_dir": os.path.abspath(work_dir or os.getcwd()),
                 "method_hint": method_hint, "tmp_num": tmp_num,
                 "overrides": overrides or {}, "src_format": src_format,
                 "executable": executable, "cfgdatadir": cfgdatadir,
                 "template": template_file, "extra_args": split_args,
                 "extra_line": extra_args,
                 "config": config, "env": environ}
        state = BatchState()
        for record in targets.read_targets(in_handle, id_column):
            process_record(record, state, batch)
        if state.exitcode == 0:
            logger_stdout.info("[INFO] %s" % state.summary())
        else:
            logger.info(state.summary())
        return state.exitcode
    except BatchError as e:
        logger.error(str(e))
        return e.exitcode
    finally:
        handler.pop_application()
        handler.close()

def process_record(record, state, batch):
    """Build and run the vtfp command for one targets record.

    Raises BatchError for problems that should stop the batch.
    """
    method = batch["method"]
    tool = vtfp.get_method(method)
    try:
        targets.check_required(record, vtfp.REQUIRED_FIELDS[tool.group])
    except RowError as e:
        logger.error(str(e))
        state.add(record.sample_id, False)
        return state
    record = vtfp.prepare_record(record, method)
    rdirs = dirs.check_dirs(dirs.resolve_dirs(record, method, batch["work_dir"],
                                              batch["method_hint"], batch["tmp_num"],
                                              batch["overrides"]))
    params = vtfp.method_args(record, method, batch["config"])
    src_format = dirs.detect_source_format(rdirs.input, record.sample_id)
    if batch["src_format"] and batch["src_format"] != src_format:
        logger.warning("%s: -f %s given but found %s input, using %s" %
                       (record.sample_id, batch["src_format"], src_format, src_format))
    cmd = vtfp.build_command(record, method, rdirs, src_format, batch["executable"],
                             batch["cfgdatadir"], batch["config"], batch["template"],
                             batch["extra_args"], params)
    logger.info("Generating [%s] json file for [%s] [%s] in [%s] with source format [%s]" %
                (method, record.alignments_in_bam, record.sample_id, cmd.out_json, src_format))
    if batch["extra_line"]:
        logger.info("Using extra arguments [ %s ]" % batch["extra_line"])
    ok = _run_command(cmd, state.commands_log(rdirs.json, method), batch["env"],
                      record.sample_id)
    state.add(record.sample_id, ok)
    return state

def _run_command(cmd, commands_log, env, sample_id):
    """vtfp is silent on success: any output counts as a failure.
    """
    cl_handler = log.command_log_handler(commands_log)
    try:
        with cl_handler.applicationbound():
            retcode, output = do.run(cmd.to_cmd(), "Running vtfp for %s" % sample_id, env=env)
    finally:
        cl_handler.close()
    output = output.rstrip("\n")
    if retcode == 0 and not output:
        return True
    logger.info("VTFP command for [ %s ] exited with exit code %s" % (sample_id, retcode))
    logger.error(output)
    return False
