"""Transcript quantification with Salmon.

https://github.com/COMBINE-lab/salmon

Salmon runs standalone (salmon, bam2salmon) and as a quantification step
after RNA-seq alignment with tophat2 or STAR.
"""
from vtfpbatch import utils
from vtfpbatch.errors import BatchError
from vtfpbatch.methods import NO_TRANSCRIPTOME, transcriptome_path

TEMPLATES = {"salmon": "salmon.json",
             "bam2salmon": "bam_to_salmon.json"}

def salmon_index_dir(transcriptome):
    """Salmon index sits beside the transcriptome's fasta/ or gtf/ directory.
    """
    return "%s/salmon" % utils.grandparent(transcriptome)

def quant_args(record, config):
    if NO_TRANSCRIPTOME in (record.transcriptome, record.transcript_anno):
        raise BatchError("NoTranscriptome for Salmon quantification")
    return [("salmon_transcriptome_val",
             transcriptome_path(salmon_index_dir(record.transcriptome), config)),
            ("quant_method", "salmon")]

def salmon_args(record, config):
    return ([("annotation_val", transcriptome_path(record.transcript_anno, config))] +
            quant_args(record, config))

def template(record, method, cfgdatadir):
    return TEMPLATES[method]
