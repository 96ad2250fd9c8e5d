"""
ContigSensors v0.1.0

Genetic code tables for amino-acid translation.

Tables are built once at import from Biopython's NCBI codon tables and
exposed read-only.  Stop codons translate to '*'.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from Bio.Data import CodonTable

from ..config.run_config import ConfigValidationError

STOP_SYMBOL = '*'


def _load_table(table_id: int) -> Mapping[str, str]:
    table = CodonTable.unambiguous_dna_by_id[table_id]
    mapping = dict(table.forward_table)
    for codon in table.stop_codons:
        mapping[codon] = STOP_SYMBOL
    return MappingProxyType(mapping)


# Bacterial, archaeal and plant plastid code
GENETIC_CODE_11 = _load_table(11)

GENETIC_CODES = MappingProxyType({
    11: GENETIC_CODE_11,
})


def translate_codon(codon: str, table_id: int = 11) -> Optional[str]:
    """
    Translate a codon to its amino acid.

    Args:
        codon: 3-letter DNA codon (any case)
        table_id: NCBI genetic code number

    Returns:
        Single-letter amino acid, '*' for a stop, or None if the codon is
        not in the table (ambiguity characters, wrong length)
    """
    table = GENETIC_CODES.get(table_id)
    if table is None:
        raise ConfigValidationError(f"Unsupported genetic code: {table_id}")
    return table.get(codon.upper())


__all__ = ['GENETIC_CODE_11', 'GENETIC_CODES', 'STOP_SYMBOL', 'translate_codon']
