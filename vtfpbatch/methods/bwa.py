"""Parameters shared by all (re)alignment methods: bwa, tophat2, STAR and splits.

Besides the aligner itself these templates run samtools, alignment
filtering against PhiX and produce bam/cram outputs, so they all need the
reference locations and thread counts set here.
"""
import os

from vtfpbatch.methods import reference_path
from vtfpbatch.pipeline import config_utils

REALIGNMENT_TEMPLATE = "realignment_wtsi_template.json"
ALIGNMENT_TEMPLATE = "alignment_wtsi_stage2_template.json"

def is_aligned(record):
    return record.alignments_in_bam == "aligned"

def alignment_args(record, alignment_method, config):
    phix = config.get("phix_fasta", config_utils.DEFAULTS["phix_fasta"])
    return [("samtools_executable", config_utils.get_program("samtools", config)),
            ("alignment_method", alignment_method),
            ("af_metrics", "%s.bam_alignment_filter_metrics.json" % record.sample_id),
            ("reference_dict", reference_path(record.ref_dict_name, config)),
            ("reference_genome_fasta", reference_path(record.ref_fasta_name, config)),
            ("alignment_reference_genome", reference_path(record.align_ref_genome, config)),
            ("phix_reference_genome_fasta", reference_path(phix, config)),
            ("alignment_filter_jar", config_utils.get_jar("alignment_filter", config)),
            ("aligner_numthreads", config_utils.get_threads("aligner", config)),
            ("br_numthreads_val", config_utils.get_threads("br", config)),
            ("b2c_mt_val", config_utils.get_threads("b2c", config)),
            ("s2b_mt_val", config_utils.get_threads("s2b", config))]

def bwa_args(record, config):
    out = [("bwa_executable", config_utils.get_program("bwa", config))]
    if record.library_layout == "SINGLE":
        out.append(("bwa_mem_p_flag", None))
    return out

def template(record, method, cfgdatadir):
    if is_aligned(record):
        return os.path.join(cfgdatadir, REALIGNMENT_TEMPLATE)
    return os.path.join(cfgdatadir, ALIGNMENT_TEMPLATE)

def prune_nodes(extra_args, config):
    """Realignment needs at least this pruning; more can be given in the extra arguments.
    """
    if any("prune" in x for x in extra_args or []):
        return None
    return config.get("prune_nodes", config_utils.DEFAULTS["prune_nodes"])

def export_param_vals(json_dir, record, alignment_method):
    return os.path.join(json_dir, "%s_p4_%s_realignment_pv_out.json" % (record.sample_id, alignment_method))
