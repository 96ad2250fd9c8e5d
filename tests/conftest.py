#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Pytest configuration and shared fixtures.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqFeature import SeqFeature, SimpleLocation
from Bio.SeqRecord import SeqRecord


# Plus-strand CDS at 11..49: ATG, 11 x GCA, TAA
PLUS_CDS = "ATG" + "GCA" * 11 + "TAA"
# Minus-strand CDS at 61..99 (reverse complement of an ATG...TAA gene)
MINUS_CDS = str(Seq("ATG" + "GCA" * 11 + "TAA").reverse_complement())

GENOME_SEQUENCE = (
    "C" * 10 + PLUS_CDS + "C" * 11 + MINUS_CDS + "C" * 21
)
GENOME_CDS = [(11, 49, '+'), (61, 99, '-')]


def write_genbank(path, records):
    """
    Write annotated contigs to a GenBank file.

    Args:
        path: Output file
        records: Iterable of (contig_id, sequence, [(start, end, strand), ...]),
            with 1-based inclusive coordinates
    """
    seq_records = []
    for contig_id, sequence, regions in records:
        record = SeqRecord(Seq(sequence), id=contig_id, name=contig_id,
                           description=f"{contig_id} test contig")
        record.annotations["molecule_type"] = "DNA"
        record.annotations["organism"] = "Testus bacterium"
        for start, end, strand in regions:
            location = SimpleLocation(start - 1, end, strand=1 if strand == '+' else -1)
            record.features.append(SeqFeature(location, type="CDS"))
        seq_records.append(record)
    SeqIO.write(seq_records, str(path), "genbank")
    return Path(path)


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="contigsensors_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def genome_sequence():
    """120 bp contig with one plus-strand and one minus-strand CDS."""
    return GENOME_SEQUENCE


@pytest.fixture
def genbank_file(temp_output_dir):
    """GenBank file holding the test contig and its two CDS features."""
    return write_genbank(
        temp_output_dir / "testus.gbk",
        [("contig1", GENOME_SEQUENCE, GENOME_CDS)],
    )


@pytest.fixture
def genome_dir(temp_output_dir):
    """Genome directory with two GenBank genomes and an unrelated file."""
    genomes = temp_output_dir / "genomes"
    genomes.mkdir()
    write_genbank(genomes / "a.gbk", [("contigA", GENOME_SEQUENCE, GENOME_CDS)])
    write_genbank(
        genomes / "b.gbff",
        [
            ("contigB1", GENOME_SEQUENCE, GENOME_CDS),
            ("contigB2", "ACGT" * 30, []),
        ],
    )
    (genomes / "notes.txt").write_text("not a genome\n")
    return genomes


@pytest.fixture
def simple_fasta(temp_output_dir):
    """FASTA file with two short sequences, one holding an ambiguity code."""
    path = temp_output_dir / "contigs.fasta"
    path.write_text(">seq1 first test sequence\nAATGTGACCTGA\n>seq2\nACGTNACGT\n")
    return path

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
