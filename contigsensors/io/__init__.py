"""
Genome I/O module for ContigSensors.

Handles reading contigs from FASTA files and annotated genomes (with
CDS-derived frame maps) from GenBank files.
"""

from .genome_io import (
    Contig,
    GenomeRecord,
    GENBANK_SUFFIXES,
    is_gzipped,
    open_file,
    iter_genome_files,
    read_fasta,
    coding_regions,
    read_genbank,
)

__all__ = [
    "Contig",
    "GenomeRecord",
    "GENBANK_SUFFIXES",
    "is_gzipped",
    "open_file",
    "iter_genome_files",
    "read_fasta",
    "coding_regions",
    "read_genbank",
]
