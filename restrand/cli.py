"""
Command-line interface for restrand.

restrand: re-orient sequencing reads to a constant strand

Author: Kevin R. Roy
"""

import logging
import sys

import click

from . import __version__
from .config import ReorientConfig
from .errors import RestrandError


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def _load_config(config_path, **overrides) -> ReorientConfig:
    """Layer CLI options over a YAML config (or the defaults)."""
    base = ReorientConfig.from_yaml(config_path) if config_path else ReorientConfig()
    return base.with_overrides(**overrides)


@click.group()
@click.version_option(version=__version__)
def cli():
    """restrand: re-orient sequencing reads to a constant strand."""
    pass


@cli.command()
@click.option('--fasta', '-f', type=str, required=True,
              help="Input FASTA (.fa/.fasta, optionally .gz); use '-' for stdin (plain text)")
@click.option('--table', '-t', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Tab-delimited table with headers (.tsv/.txt, optionally .gz)')
@click.option('--out', '-o', type=click.Path(dir_okay=False),
              help='Output FASTA path (default: stdout)')
@click.option('--id-col', type=str, default=None,
              help='Name of the read ID column in the table (default: ReadName)')
@click.option('--orientation-col', type=str, default=None,
              help="Name of the orientation column ('+' for cDNA, '-' for rc(cDNA)) (default: orientation)")
@click.option('--target-orientation', type=str, default=None,
              help="Orientation to keep as-is; other reads are reverse-complemented. '+' or '-' (default: +)")
@click.option('--drop-missing/--keep-missing', default=None,
              help='Drop reads missing from the table instead of passing them through (default: keep)')
@click.option('--flipped-suffix', type=str, default=None,
              help="Suffix appended to headers of flipped reads (e.g. '/rc'); empty = no suffix")
@click.option('--on-duplicate', type=click.Choice(['error', 'last', 'first']), default=None,
              help='How to handle a read listed twice in the table (default: error)')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with default settings; command-line options take precedence')
@click.option('--verbose', '-v', is_flag=True, help='Log per-read diagnostics')
def fasta(fasta, table, out, id_col, orientation_col, target_orientation,
          drop_missing, flipped_suffix, on_duplicate, config_path, verbose):
    """
    Re-orient FASTA reads using a per-read orientation table.

    Reads whose table orientation differs from --target-orientation are
    reverse-complemented. Output sequences are wrapped at 60 columns.

    \b
    Example:
      restrand fasta -f reads.fa.gz -t orientations.tsv \\
                     --flipped-suffix /rc -o reads.oriented.fa
    """
    from .processor import reorient_fasta

    _setup_logging(verbose)

    try:
        config = _load_config(
            config_path,
            id_column=id_col,
            orientation_column=orientation_col,
            target_orientation=target_orientation,
            drop_missing=drop_missing,
            flipped_suffix=flipped_suffix,
            on_duplicate=on_duplicate,
        )
        reorient_fasta(fasta, table, out, config)
    except (RestrandError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option('--fastq', '-i', type=str, required=True,
              help="Input FASTQ (.fq/.fastq, optionally .gz); use '-' for stdin (plain text)")
@click.option('--out', '-o', type=click.Path(dir_okay=False),
              help='Output FASTQ path (default: stdout)')
@click.option('--flipped-suffix', type=str, default=None,
              help='Suffix appended to headers of flipped reads; empty = no suffix')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with default settings; command-line options take precedence')
@click.option('--verbose', '-v', is_flag=True, help='Log per-read diagnostics')
def fastq(fastq, out, flipped_suffix, config_path, verbose):
    """
    Normalize FASTQ reads to '+' using 'orientation:' header tags.

    Reads tagged 'orientation:-' are reverse-complemented, their quality
    string is reversed and the tag is rewritten to 'orientation:+'.
    Untagged reads are written unchanged.

    \b
    Example:
      restrand fastq -i reads.fq.gz -o reads.oriented.fq
    """
    from .processor import reorient_fastq

    _setup_logging(verbose)

    try:
        config = _load_config(config_path, flipped_suffix=flipped_suffix)
        reorient_fastq(fastq, out, config)
    except (RestrandError, ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
