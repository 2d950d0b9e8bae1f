# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Per-scaffold report for a transposition run."""

import pandas as pd


def output_report(stats, registry, report_filename):
    """Write a TSV with one line per scaffold touched by the run.

    Args:
        stats: TransposeStats of the run.
        registry: ScaffoldRegistry of the new assembly.
        report_filename: Path for the TSV output.
    """
    _scaffolds = sorted(set(stats.transposed) | set(stats.missing))
    _report0 = {
        'scaffold': _scaffolds,
        'new_sequence': [registry[s].sequence_id if s in registry else '' for s in _scaffolds],
        'new_start': [registry[s].start if s in registry else pd.NA for s in _scaffolds],
        'new_end': [registry[s].end if s in registry else pd.NA for s in _scaffolds],
        'new_strand': [str(registry[s].strand) if s in registry else '' for s in _scaffolds],
        'transposed': [stats.transposed.get(s, 0) for s in _scaffolds],
        'skipped': [stats.missing.get(s, 0) for s in _scaffolds],
    }
    _report = pd.DataFrame(_report0)
    _report = _report.astype({'new_start': 'Int64', 'new_end': 'Int64'})

    _comment = ['## RunInfo']
    _comment += ['{}:{}'.format(*tup) for tup in stats.run_info().items()]

    with open(report_filename, 'w') as outh:
        outh.write('\t'.join(_comment) + '\n')
        _report.to_csv(outh, sep='\t', index=False)
    return _report
