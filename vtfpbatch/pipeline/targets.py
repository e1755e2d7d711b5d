"""Read targets files: one tab separated line per lane or tagged sample.

Columns are positional; the first column is not used when deriving the
sample id.
"""
from collections import namedtuple

from vtfpbatch.errors import RowError

TargetRecord = namedtuple("TargetRecord", ["sample_id", "run", "position", "tag",
                                           "alignments_in_bam", "align_ref_genome",
                                           "ref_dict_name", "ref_fasta_name",
                                           "transcriptome", "transcript_anno",
                                           "library_type", "library_layout",
                                           "ref_transcript_fasta"])

# 1-based column of each field in the targets file
COLUMNS = [("run", 2), ("position", 3), ("tag", 4), ("alignments_in_bam", 5),
           ("align_ref_genome", 6), ("ref_dict_name", 7), ("ref_fasta_name", 8),
           ("transcriptome", 9), ("transcript_anno", 10), ("library_type", 11),
           ("library_layout", 12), ("ref_transcript_fasta", 13)]

def sample_id(run, position, tag=None):
    """WTSI composite id: run_position, with #tag for multiplexed lanes.
    """
    if tag:
        return "%s_%s#%s" % (run, position, tag)
    return "%s_%s" % (run, position)

def _get_column(fields, column):
    return fields[column - 1].strip() if len(fields) >= column else ""

def parse_line(line, id_column=None, delimiter="\t"):
    """Parse a targets line into a TargetRecord.

    id_column, when given, is the 1-based column holding the sample id;
    otherwise the id is built from run, position and tag.
    """
    fields = line.rstrip("\r\n").split(delimiter)
    vals = {name: _get_column(fields, column) for name, column in COLUMNS}
    if id_column:
        vals["sample_id"] = _get_column(fields, id_column)
    elif vals["run"] and vals["position"]:
        vals["sample_id"] = sample_id(vals["run"], vals["position"], vals["tag"])
    else:
        vals["sample_id"] = ""
    return TargetRecord(**vals)

def check_required(record, fields):
    """Raise a RowError when any of the named fields is empty.
    """
    if not record.sample_id:
        raise RowError("Could not derive a sample id from targets line")
    missing = [f for f in fields if not getattr(record, f)]
    if missing:
        raise RowError("%s: empty required column(s) %s" % (record.sample_id, ", ".join(missing)))
    return record

def read_targets(in_handle, id_column=None):
    """Iterate over records in a targets file, skipping blank lines.
    """
    for line in in_handle:
        if line.strip():
            yield parse_line(line, id_column)
