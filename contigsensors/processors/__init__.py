"""
Processors module for ContigSensors.

Drivers that wire sensors, classifiers and sampling to genome input:
- ContigProcessor: chunked random training sets from genome directories
- GenomeProcessor: full verification sets from one genome
- FastaProcessor: unlabelled prediction input from FASTA files
"""

from .contig_processor import ContigProcessor
from .genome_processor import GenomeProcessor
from .fasta_processor import FastaProcessor

__all__ = [
    "ContigProcessor",
    "GenomeProcessor",
    "FastaProcessor",
]
