"""Split human reads from sample data after realignment.

hs_split separates reads aligning to the human reference; y_split
separates reads from the human Y chromosome. Both realign with bwa mem.
"""
import os

from vtfpbatch.methods import reference_path
from vtfpbatch.pipeline import config_utils

HS_TEMPLATE = "realignment_wtsi_stage2_humansplit_template.json"
HS_REFERENCE = "Homo_sapiens/1000Genomes/all"

def hs_split_args(record, config):
    return [("reference_dict_hs",
             reference_path("%s/picard/human_g1k_v37.fasta.dict" % HS_REFERENCE, config)),
            ("hs_reference_genome_fasta",
             reference_path("%s/fasta/human_g1k_v37.fasta" % HS_REFERENCE, config)),
            ("hs_alignment_reference_genome",
             reference_path("%s/bwa0_6/human_g1k_v37.fasta" % HS_REFERENCE, config)),
            ("alignment_filter_jar", config_utils.get_jar("alignment_filter_hs", config)),
            ("alignment_hs_method", "bwa_aln")]

def hs_split_template(record, method, cfgdatadir):
    return os.path.join(cfgdatadir, HS_TEMPLATE)

def y_split_args(record, config):
    # bambi replaces illumina2bam from p4 0.18.6, jar kept for older templates
    return [("split_bam_by_chromosomes_jar", config_utils.get_jar("split_bam_by_chromosomes", config)),
            ("final_output_prep_target_name", "split_by_chromosome"),
            ("split_indicator", "_yhuman"),
            ("split_bam_by_chromosome_flags", "S=Y"),
            ("split_bam_by_chromosome_flags", "V=true"),
            ("s2b_mt_val", config_utils.get_threads("s2b", config))]
