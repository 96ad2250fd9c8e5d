#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ContigSensors.

This module provides the main CLI entry point and all subcommands for
producing training, verification and prediction files from genomic DNA.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.run_config import ConfigValidationError, LocationClassType, SensorType
from .config.schema import (
    CONFIG_TEMPLATES,
    build_run_config,
    load_config,
    merge_cli_overrides,
    save_config_template,
    validate_config,
)
from .processors import ContigProcessor, FastaProcessor, GenomeProcessor

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Write debug messages to STDERR')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    ContigSensors: DNA sensor encoding for coding-region models

    Converts genomic DNA and its annotated coding regions into tab-delimited
    training, verification and prediction files.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet

    level = logging.DEBUG if verbose else (logging.WARNING if quiet else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


# ============================================================================
# Shared options
# ============================================================================

def sensor_options(func):
    """Options controlling the sensor encoding."""
    func = click.option('--sensor', 'sensor_type',
                        type=click.Choice([t.value for t in SensorType]),
                        help='Type of DNA sensor to use')(func)
    func = click.option('--right', '-d', 'right_width', type=int,
                        help='Number of positions to examine downstream of the target')(func)
    func = click.option('--left', '-u', 'left_width', type=int,
                        help='Number of positions to examine upstream of the target')(func)
    return func


def classification_options(func):
    """Options controlling the location classification."""
    func = click.option('--no-edge-filter', is_flag=True,
                        help='Do not restrict edge/start/stop output to marker codons')(func)
    func = click.option('--negative', '-n', is_flag=True,
                        help='Include minus-strand proteins as coding regions')(func)
    func = click.option('--type', 'class_type',
                        type=click.Choice([t.value for t in LocationClassType]),
                        help='Type of classification')(func)
    return func


def _resolve_config(config_file, overrides):
    """Load the config file, apply CLI overrides and build the RunConfig."""
    config = load_config(Path(config_file) if config_file else None)
    config = merge_cli_overrides(config, overrides)
    return build_run_config(config)


def _fail(message):
    click.echo(f"✗ {message}", err=True)
    sys.exit(1)


def _report(counts):
    total = sum(counts.values())
    click.echo(f"✓ {total:,} rows written", err=True)
    for label, count in sorted(counts.items()):
        click.echo(f"  {label}: {count:,}", err=True)


# ============================================================================
# Data Generation Commands
# ============================================================================

@main.command()
@click.argument('genome_dirs', nargs=-1, required=True,
                type=click.Path(exists=True, file_okay=False))
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML)')
@click.option('--output', '-o', type=click.Path(), default='-',
              help='Output file (default: STDOUT)')
@sensor_options
@classification_options
@click.option('--run', '-r', 'run_length', type=int,
              help='Number of accepted positions per output run')
@click.option('--chunk', '-k', 'chunk_size', type=int,
              help='Size of a contig section for choosing a run')
@click.option('--fuzz', 'fuzz_factor', type=float,
              help='Class balance factor: 0 to stream, else 1.0-2.0')
@click.option('--seed', type=int, help='Random seed for reproducibility')
def train(genome_dirs, config_file, output, sensor_type, left_width, right_width,
          class_type, negative, no_edge_filter, run_length, chunk_size, fuzz_factor, seed):
    """Produce a training set from directories of GenBank genomes."""
    try:
        run_config = _resolve_config(config_file, {
            'sensors.type': sensor_type,
            'sensors.left_width': left_width,
            'sensors.right_width': right_width,
            'classification.type': class_type,
            'classification.negative': True if negative else None,
            'output.edge_filter': False if no_edge_filter else None,
            'output.fuzz_factor': fuzz_factor,
            'sampling.run_length': run_length,
            'sampling.chunk_size': chunk_size,
            'sampling.seed': seed,
        })
        with click.open_file(output, 'w') as out:
            processor = ContigProcessor(run_config, genome_dirs, out)
            counts = processor.run()
    except (ConfigValidationError, FileNotFoundError) as e:
        _fail(e)
    except OSError as e:
        _fail(f"Error writing {output}: {e}")

    _report(counts)


@main.command()
@click.argument('genome_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML)')
@click.option('--output', '-o', type=click.Path(), default='-',
              help='Output file (default: STDOUT)')
@sensor_options
@classification_options
def verify(genome_file, config_file, output, sensor_type, left_width, right_width,
           class_type, negative, no_edge_filter):
    """Produce a verification file covering every position of one genome."""
    try:
        run_config = _resolve_config(config_file, {
            'sensors.type': sensor_type,
            'sensors.left_width': left_width,
            'sensors.right_width': right_width,
            'classification.type': class_type,
            'classification.negative': True if negative else None,
            'output.edge_filter': False if no_edge_filter else None,
        })
        with click.open_file(output, 'w') as out:
            processor = GenomeProcessor(run_config, genome_file, out)
            counts = processor.run()
    except (ConfigValidationError, FileNotFoundError) as e:
        _fail(e)
    except (OSError, ValueError) as e:
        _fail(f"Error processing {genome_file}: {e}")

    _report(counts)


@main.command()
@click.argument('fasta_files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False))
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML)')
@click.option('--output', '-o', type=click.Path(), default='-',
              help='Output file (default: STDOUT)')
@sensor_options
@click.option('--edge-filter', '-f', is_flag=True, help='Filter for known edge codons')
@click.option('--skip-ambiguous', is_flag=True,
              help='Leave out positions whose window contains ambiguity characters')
def encode(fasta_files, config_file, output, sensor_type, left_width, right_width,
           edge_filter, skip_ambiguous):
    """Encode FASTA sequences as prediction input for a model."""
    try:
        run_config = _resolve_config(config_file, {
            'sensors.type': sensor_type,
            'sensors.left_width': left_width,
            'sensors.right_width': right_width,
        })
        with click.open_file(output, 'w') as out:
            processor = FastaProcessor(
                run_config.sensor_type,
                run_config.sensors,
                fasta_files,
                out,
                edge_filter=edge_filter,
                skip_ambiguous=skip_ambiguous,
            )
            rows = processor.run()
    except (ConfigValidationError, FileNotFoundError) as e:
        _fail(e)
    except OSError as e:
        _fail(f"Error writing {output}: {e}")

    click.echo(f"✓ {rows:,} rows written", err=True)


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='contigsensors_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t', type=click.Choice(list(CONFIG_TEMPLATES)),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
    except (ConfigValidationError, OSError) as e:
        _fail(f"Error creating configuration: {e}")

    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except (ConfigValidationError, OSError) as e:
        _fail(f"Error validating configuration: {e}")

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))
    except (ConfigValidationError, OSError) as e:
        _fail(f"Error reading configuration: {e}")

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    sensors = config['sensors']
    classification = config['classification']
    sampling = config['sampling']
    click.echo("\nSensors:")
    click.echo(f"  Type: {sensors['type']}")
    click.echo(f"  Window: -{sensors['left_width']} .. +{sensors['right_width']}")
    click.echo("\nClassification:")
    click.echo(f"  Type: {classification['type']}")
    click.echo(f"  Minus strand: {'yes' if classification['negative'] else 'no'}")
    click.echo("\nSampling:")
    click.echo(f"  Chunk size: {sampling['chunk_size']:,}")
    click.echo(f"  Run length: {sampling['run_length']:,}")
    click.echo(f"  Seed: {sampling['seed'] if sampling['seed'] is not None else 'random'}")
    click.echo("\nOutput:")
    fuzz = config['output']['fuzz_factor']
    click.echo(f"  Balancing: {'off' if not fuzz else f'fuzz factor {fuzz}'}")


if __name__ == '__main__':
    main()
