RUN = '12345'
POSITION = '1'
TAG = '7'
SAMPLE_ID = '12345_1#7'

FIELDS = [
    'EGAN00001',
    RUN,
    POSITION,
    TAG,
    'unaligned',
    'Homo_sapiens/GRCh38_15/all/bwa0_6/Homo_sapiens.GRCh38_15.fa',
    'Homo_sapiens/GRCh38_15/all/picard/Homo_sapiens.GRCh38_15.fa.dict',
    'Homo_sapiens/GRCh38_15/all/fasta/Homo_sapiens.GRCh38_15.fa',
    'Homo_sapiens/ensembl_90_transcriptome/GRCh38_15/tophat2/GRCh38_15.known',
    'Homo_sapiens/ensembl_90_transcriptome/GRCh38_15/gtf/ensembl_90_transcriptome-GRCh38_15.gtf',
    'Illumina cDNA protocol',
    'PAIRED',
    'Homo_sapiens/ensembl_90_transcriptome/GRCh38_15/fasta/ensembl_90_transcriptome-GRCh38_15.fa',
]

LINE = '\t'.join(FIELDS) + '\n'

CONFIG = {
    'repository': '/repository',
}
