import pytest

from tests.unit.data import CONFIG, LINE
from vtfpbatch.errors import BatchError
from vtfpbatch.methods import salmon
from vtfpbatch.pipeline import targets


@pytest.fixture
def record():
    return targets.parse_line(LINE)


def test_salmon_index_dir():
    assert salmon.salmon_index_dir('Homo_sapiens/ensembl_90/GRCh38/tophat2/GRCh38.known') == \
        'Homo_sapiens/ensembl_90/GRCh38/salmon'


def test_quant_args_relative_transcriptome(record):
    assert salmon.quant_args(record, CONFIG) == [
        ('salmon_transcriptome_val',
         '/repository/transcriptomes/Homo_sapiens/ensembl_90_transcriptome/GRCh38_15/salmon'),
        ('quant_method', 'salmon')]


def test_quant_args_absolute_transcriptome(record):
    record = record._replace(transcriptome='/ref/ensembl/GRCh38/tophat2/GRCh38.known')
    assert dict(salmon.quant_args(record, CONFIG))['salmon_transcriptome_val'] == \
        '/ref/ensembl/GRCh38/salmon'


@pytest.mark.parametrize('field', ['transcriptome', 'transcript_anno'])
def test_quant_args_need_transcriptome_and_annotation(record, field):
    record = record._replace(**{field: 'NoTranscriptome'})
    with pytest.raises(BatchError):
        salmon.quant_args(record, CONFIG)


def test_salmon_args_include_annotation(record):
    keys = [k for k, _ in salmon.salmon_args(record, CONFIG)]
    assert keys == ['annotation_val', 'salmon_transcriptome_val', 'quant_method']


@pytest.mark.parametrize('method, expected', [
    ('salmon', 'salmon.json'),
    ('bam2salmon', 'bam_to_salmon.json'),
])
def test_template(record, method, expected):
    assert salmon.template(record, method, '/vtlib') == expected
