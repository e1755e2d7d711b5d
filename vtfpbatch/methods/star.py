"""Spliced RNA-seq alignment with STAR.
"""
from vtfpbatch import utils
from vtfpbatch.methods import salmon, transcriptome_path
from vtfpbatch.pipeline import config_utils

def remap_index_fn(ref_file):
    """Map a reference fasta to the STAR index directory of the same genome.

    genome/fasta/genome.fa -> genome/star; paths already ending in /star are kept.
    """
    if ref_file.endswith("/star"):
        return ref_file
    return "%s/star" % utils.grandparent(ref_file)

def prepare(record):
    return record._replace(align_ref_genome=remap_index_fn(record.align_ref_genome))

def star_args(record, config):
    return ([("annotation_val", transcriptome_path(record.transcript_anno, config)),
             ("sjdb_overhang_val", config.get("sjdb_overhang", 74)),
             ("star_executable", config_utils.get_program("star", config))] +
            salmon.quant_args(record, config))
