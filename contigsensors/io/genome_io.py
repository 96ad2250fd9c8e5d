#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Genome I/O module for ContigSensors.

Consolidated module containing:
- Contig data structure
- FASTA sequence reading (encode-only mode)
- GenBank genome reading with CDS-derived frame maps (training and
  verification modes)
- Genome directory discovery

Files may be gzip compressed.
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, TextIO, Union

from Bio import SeqIO
from Bio.SeqFeature import SeqFeature

from ..classification.location_list import CodingRegion, LocationList

logger = logging.getLogger(__name__)

GENBANK_SUFFIXES = ('.gb', '.gbk', '.gbff', '.genbank')


# =============================================================================
# SECTION 2: DATA STRUCTURES
# =============================================================================

@dataclass
class Contig:
    """
    Contiguous DNA sequence.

    Attributes:
        id: Contig identifier
        sequence: DNA sequence
        description: FASTA/GenBank description line
    """
    id: str
    sequence: str
    description: str = ''

    @property
    def length(self) -> int:
        return len(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)

    def __repr__(self) -> str:
        return f"Contig(id={self.id!r}, length={self.length})"


@dataclass
class GenomeRecord:
    """
    Annotated genome loaded from a GenBank file.

    Attributes:
        name: Genome name (organism, or the file stem)
        path: Source file
        contigs: Contigs in file order
        location_lists: Frame map per contig ID
    """
    name: str
    path: Path
    contigs: List[Contig] = field(default_factory=list)
    location_lists: Dict[str, LocationList] = field(default_factory=dict)

    @property
    def total_length(self) -> int:
        return sum(c.length for c in self.contigs)

    def __repr__(self) -> str:
        return (f"GenomeRecord(name={self.name!r}, contigs={len(self.contigs)}, "
                f"length={self.total_length:,})")


# =============================================================================
# SECTION 3: FILE HANDLING
# =============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)
    return filepath.suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path]) -> TextIO:
    """
    Open a file for reading with automatic gzip detection.

    Args:
        filepath: Path to file

    Returns:
        File handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        return gzip.open(filepath, 'rt')
    return open(filepath, 'r')


def _base_suffix(filepath: Path) -> str:
    """File suffix ignoring a trailing compression suffix."""
    if is_gzipped(filepath):
        return Path(filepath.stem).suffix.lower()
    return filepath.suffix.lower()


def iter_genome_files(directory: Union[str, Path]) -> List[Path]:
    """
    List the GenBank files in a genome directory, sorted by name.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"{directory} is not a valid directory.")
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and _base_suffix(p) in GENBANK_SUFFIXES
    )


# =============================================================================
# SECTION 4: FASTA INPUT
# =============================================================================

def read_fasta(filepath: Union[str, Path]) -> Iterator[Contig]:
    """
    Read FASTA file and yield Contig objects.

    Args:
        filepath: Path to FASTA file (can be gzipped)

    Yields:
        Contig objects
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"FASTA file not found: {filepath}")

    with open_file(filepath) as handle:
        for record in SeqIO.parse(handle, "fasta"):
            yield Contig(
                id=record.id,
                sequence=str(record.seq),
                description=record.description,
            )


# =============================================================================
# SECTION 5: GENBANK INPUT
# =============================================================================

def coding_regions(feature: SeqFeature) -> List[CodingRegion]:
    """
    Convert a CDS feature into the coding regions of its location parts.

    Parts stay in transcription order, the order Biopython keeps them in
    for both strands, so a joined CDS can be painted as one sequence.
    """
    regions = []
    for part in feature.location.parts:
        strand = '-' if part.strand == -1 else '+'
        regions.append(CodingRegion(int(part.start) + 1, int(part.end), strand))
    return regions


def read_genbank(filepath: Union[str, Path]) -> GenomeRecord:
    """
    Read an annotated genome from a GenBank file.

    Every record becomes a contig; its CDS features are painted onto the
    contig's LocationList, a joined CDS as one coding sequence.  A CDS that
    does not fit the contig or mixes strands is logged and skipped.

    Args:
        filepath: Path to GenBank file (can be gzipped)

    Returns:
        GenomeRecord with contigs and frame maps

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"GenBank file not found: {filepath}")

    genome = GenomeRecord(name=filepath.name.split('.')[0], path=filepath)

    with open_file(filepath) as handle:
        for record in SeqIO.parse(handle, "genbank"):
            organism = record.annotations.get('organism')
            if organism and not genome.contigs:
                genome.name = organism
            sequence = str(record.seq)
            contig = Contig(id=record.id, sequence=sequence, description=record.description)
            locations = LocationList(record.id, len(sequence))

            for feature in record.features:
                if feature.type != 'CDS':
                    continue
                try:
                    locations.add_coding_sequence(coding_regions(feature))
                except ValueError as e:
                    logger.warning(f"Skipping CDS in {record.id}: {e}")

            genome.contigs.append(contig)
            genome.location_lists[contig.id] = locations
            logger.debug(f"Loaded {contig!r} with {locations.num_regions} coding regions")

    return genome


__all__ = [
    'Contig',
    'GenomeRecord',
    'GENBANK_SUFFIXES',
    'is_gzipped',
    'open_file',
    'iter_genome_files',
    'read_fasta',
    'coding_regions',
    'read_genbank',
]
