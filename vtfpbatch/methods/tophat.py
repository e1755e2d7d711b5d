"""Next-gen alignments with TopHat2, a spliced read mapper for RNA-seq experiments.

http://tophat.cbcb.umd.edu
"""
from vtfpbatch.errors import BatchError
from vtfpbatch.methods import NO_TRANSCRIPTOME, salmon, transcriptome_path

def _set_transcriptome_option(record, config):
    # prefer a transcriptome index vs the annotation
    if record.transcriptome != NO_TRANSCRIPTOME:
        return [("transcriptome_val", transcriptome_path(record.transcriptome, config))]
    elif record.transcript_anno != NO_TRANSCRIPTOME:
        return [("annotation_val", transcriptome_path(record.transcript_anno, config))]
    raise BatchError("NoTranscriptome for Tophat2 alignment")

def _set_stranded_flag(record):
    if "dUTP" in record.library_type:
        return [("library_type", "fr-firststrand")]
    return [("library_type", "fr-unstranded")]

def tophat_args(record, config):
    return (_set_transcriptome_option(record, config) + _set_stranded_flag(record) +
            salmon.quant_args(record, config))
