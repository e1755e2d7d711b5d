import pytest

from tests.unit.data import CONFIG, LINE, SAMPLE_ID
from vtfpbatch.methods import bwa
from vtfpbatch.pipeline import targets


@pytest.fixture
def record():
    return targets.parse_line(LINE)


def test_alignment_args(record):
    result = dict(bwa.alignment_args(record, 'bwa_mem', CONFIG))
    assert result['alignment_method'] == 'bwa_mem'
    assert result['af_metrics'] == '%s.bam_alignment_filter_metrics.json' % SAMPLE_ID
    assert result['reference_dict'] == '/repository/references/%s' % record.ref_dict_name
    assert result['alignment_reference_genome'] == \
        '/repository/references/%s' % record.align_ref_genome
    assert result['phix_reference_genome_fasta'] == \
        '/repository/references/PhiX/Sanger-SNPs/all/fasta/phix_unsnipped_short_no_N.fa'
    assert result['aligner_numthreads'] == 16
    assert result['br_numthreads_val'] == 7


def test_thread_counts_from_config(record):
    config = dict(CONFIG, threads={'aligner': 32})
    result = dict(bwa.alignment_args(record, 'bwa_aln', config))
    assert result['aligner_numthreads'] == 32
    assert result['b2c_mt_val'] == 7


@pytest.mark.parametrize('layout, expected', [
    ('SINGLE', [('bwa_executable', 'bwa0_6'), ('bwa_mem_p_flag', None)]),
    ('PAIRED', [('bwa_executable', 'bwa0_6')]),
])
def test_bwa_args(record, layout, expected):
    record = record._replace(library_layout=layout)
    assert bwa.bwa_args(record, CONFIG) == expected


@pytest.mark.parametrize('aligned, expected', [
    ('aligned', '/vtlib/realignment_wtsi_template.json'),
    ('unaligned', '/vtlib/alignment_wtsi_stage2_template.json'),
    ('', '/vtlib/alignment_wtsi_stage2_template.json'),
])
def test_template(record, aligned, expected):
    record = record._replace(alignments_in_bam=aligned)
    assert bwa.template(record, 'bwa_mem', '/vtlib') == expected


@pytest.mark.parametrize('extra_args, expected', [
    (None, 'fop.*samtools_stats_F0.*00_bait.*-'),
    (['-keys', 'foo', '-vals', 'bar'], 'fop.*samtools_stats_F0.*00_bait.*-'),
    (['-prune_nodes', 'other'], None),
])
def test_prune_nodes(extra_args, expected):
    assert bwa.prune_nodes(extra_args, CONFIG) == expected


def test_export_param_vals(record):
    assert bwa.export_param_vals('/json', record, 'bwa_mem') == \
        '/json/%s_p4_bwa_mem_realignment_pv_out.json' % SAMPLE_ID
