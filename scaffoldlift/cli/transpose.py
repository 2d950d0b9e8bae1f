# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

""" ScaffoldLift transpose

"""
import sys
import os
from time import time
import logging as lg

from . import SubcommandOptions, configure_logging, check_input_file, check_output_file
from .console import Stopwatch
from ..annotation import get_overlap_class
from ..core.errors import ConfigurationError
from ..core.registry import ScaffoldRegistry
from ..core.reporter import output_report
from ..core.transposer import Transposer
from ..formats import get_adapter


class TransposeOptions(SubcommandOptions):

    OPTS = """
    - Input Options:
        - old_gff:
            positional: True
            help: GFF file with the scaffold positions on the old genome
                  version.
        - new_gff:
            positional: True
            help: GFF file with the scaffold positions on the new genome
                  version.
        - annotation:
            positional: True
            help: Annotation to transpose (.gff/.gff3/.gtf or .vcf). The file
                  extension selects the format.
        - id_attribute:
            default: ID
            help: GFF attribute holding the scaffold identifier. Scaffolds
                  are matched between the two genome versions on this value.
    - Output Options:
        - output:
            positional: True
            help: Transposed annotation on the new genome, in the same
                  format as the input.
        - report:
            help: Write a per-scaffold TSV summary to this file.
    - Overlap Options:
        - overlap_class:
            default: intervaltree
            choices:
                - intervaltree
                - table
            help: How features are matched to old scaffolds. "intervaltree"
                  computes full-containment overlaps from OLD_GFF; "table"
                  reads a precomputed table given with --intersect.
        - intersect:
            help: Precomputed output of "intersectBed -a ANNOTATION -b OLD_GFF
                  -f 1.0 -wo". Implies --overlap_class table.
    - Reporting Options:
        - quiet:
            action: store_true
            help: Silence (most) output.
        - verbose:
            action: store_true
            help: Show detailed progress and timing.
        - debug:
            action: store_true
            help: Print debug messages.
        - logfile:
            type: argparse.FileType('w')
            help: Log output to this file.
    """

    def __init__(self, args):
        super().__init__(args)
        if self.logfile is None:
            self.logfile = sys.stderr
        if self.intersect is not None:
            self.overlap_class = 'table'

    def validate(self):
        """Check paths before any work is done.

        Raises:
            ConfigurationError
        """
        for path in (self.old_gff, self.new_gff, self.annotation):
            check_input_file(path)
        if self.overlap_class == 'table':
            if self.intersect is None:
                raise ConfigurationError('--overlap_class table requires --intersect')
            check_input_file(self.intersect)
        check_output_file(self.output)
        if self.report is not None:
            check_output_file(self.report)


def run(args):
    """Transpose an annotation from the old genome version to the new one.

    Args:
        args: Parsed argparse namespace.
    """
    opts = TransposeOptions(args)
    console = configure_logging(opts)
    lg.info('\n{}\n'.format(opts))
    opts.validate()
    total_time = time()
    stopwatch = Stopwatch()

    console.banner(opts.version, 'Annotation transposition')

    adapter = get_adapter(opts.annotation, opts.id_attribute)

    console.section('Input')
    console.item('Old genome', os.path.basename(opts.old_gff))
    console.item('New genome', os.path.basename(opts.new_gff))
    console.item('Annotation', '{} [{}]'.format(os.path.basename(opts.annotation), adapter.name))
    if opts.overlap_class == 'table':
        console.item('Overlaps', os.path.basename(opts.intersect))
    console.blank()

    stopwatch.start('Registry')
    lg.info('Loading scaffolds of the new genome version...')
    registry = ScaffoldRegistry.from_gff(opts.new_gff, opts.id_attribute)
    lg.info(f'Loaded {len(registry)} scaffolds.')
    console.verbose('Loaded {:,} scaffolds ({} duplicate ids)'.format(len(registry), registry.duplicates))

    stopwatch.start('Overlap')
    Overlap = get_overlap_class(opts.overlap_class)
    if opts.overlap_class == 'table':
        provider = Overlap(opts.intersect)
    else:
        lg.info('Indexing scaffolds of the old genome version...')
        provider = Overlap(opts.old_gff)
        console.verbose('Indexed {:,} old scaffolds'.format(provider.num_scaffolds))

    stopwatch.start('Transpose')
    transposer = Transposer(registry, adapter, provider)
    stats = transposer.run(opts.output)
    stopwatch.stop()

    console.status('Transposed {:,} of {:,} records'.format(stats.num_transposed, stats.overlap_rows))
    if stats.num_missing:
        console.detail('{:,} records skipped: {:,} scaffolds not found in the new genome version'.format(
            stats.num_missing, len(stats.missing)))
    console.blank()

    if opts.report is not None:
        output_report(stats, registry, opts.report)

    console.section('Output')
    console.output_file(opts.output)
    if opts.report is not None:
        console.output_file(opts.report)
    console.blank()
    console.timing_table(stopwatch)
    lg.info('scaffoldlift transpose complete ({:.1f}s)'.format(time() - total_time))
    return stats
