import pytest

from tests.unit.data import CONFIG, LINE
from vtfpbatch.methods import star
from vtfpbatch.pipeline import targets


@pytest.fixture
def record():
    return targets.parse_line(LINE)


@pytest.mark.parametrize('ref_file, expected', [
    ('Homo_sapiens/GRCh38/genome/fasta/foo.fa', 'Homo_sapiens/GRCh38/genome/star'),
    ('/abs/genome/fasta/foo.fa', '/abs/genome/star'),
    ('Homo_sapiens/GRCh38/star', 'Homo_sapiens/GRCh38/star'),
])
def test_remap_index_fn(ref_file, expected):
    assert star.remap_index_fn(ref_file) == expected


def test_prepare_updates_alignment_reference(record):
    result = star.prepare(record)
    assert result.align_ref_genome == 'Homo_sapiens/GRCh38_15/all/star'
    assert result.ref_fasta_name == record.ref_fasta_name


def test_star_args(record):
    result = star.star_args(record, CONFIG)
    assert result[:3] == [
        ('annotation_val', '/repository/transcriptomes/%s' % record.transcript_anno),
        ('sjdb_overhang_val', 74),
        ('star_executable', 'star')]
    assert ('quant_method', 'salmon') in result


def test_star_executable_from_config(record):
    config = dict(CONFIG, resources={'star': {'cmd': 'STAR-2.5'}})
    assert ('star_executable', 'STAR-2.5') in star.star_args(record, config)
