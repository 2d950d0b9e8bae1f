# -*- coding: utf-8 -*-

# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

"""Pretty stdout output for the ScaffoldLift CLI.

Separate from Python logging (which goes to stderr). The Console writes
structured, human-readable progress to stdout while logging continues to
handle debug/diagnostic output on stderr.
"""

import sys
from time import perf_counter


class Stopwatch:
    """Collects named timing segments for a benchmark summary."""

    def __init__(self):
        self._timings = []        # [(name, elapsed)]
        self._start = None
        self._active = None

    def start(self, name):
        """Begin timing a named stage, closing the previous one."""
        now = perf_counter()
        if self._active:
            self._timings.append((self._active[0], now - self._active[1]))
        self._active = (name, now)
        if self._start is None:
            self._start = now

    def stop(self):
        """Stop the current segment."""
        if self._active:
            now = perf_counter()
            self._timings.append((self._active[0], now - self._active[1]))
            self._active = None

    @property
    def total(self):
        return perf_counter() - self._start if self._start else 0.0

    @property
    def timings(self):
        return list(self._timings)


class Console:
    """Pretty stdout output for the ScaffoldLift CLI."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3

    def __init__(self, level=NORMAL, stream=None):
        self.level = level
        self.stream = stream or sys.stdout
        self._use_color = hasattr(self.stream, 'isatty') and self.stream.isatty()

    def banner(self, version, subtitle):
        """Print product banner."""
        if self.level < self.NORMAL:
            return
        self._write('')
        if self._use_color:
            self._write('\033[1mScaffoldLift v{}\033[0m -- {}'.format(version, subtitle))
        else:
            self._write('ScaffoldLift v{} -- {}'.format(version, subtitle))
        self._write('')

    def section(self, title):
        """Print indented section header."""
        if self.level < self.NORMAL:
            return
        self._write('  {}'.format(title))

    def item(self, label, value, indent=4):
        """Print key: value pair."""
        if self.level < self.NORMAL:
            return
        padding = ' ' * indent
        self._write('{}{:<14}{}'.format(padding, label + ':', value))

    def status(self, message):
        if self.level < self.NORMAL:
            return
        self._write('  {}'.format(message))

    def detail(self, message):
        if self.level < self.NORMAL:
            return
        self._write('    {}'.format(message))

    def verbose(self, message):
        """Print only in verbose/debug mode."""
        if self.level < self.VERBOSE:
            return
        self._write('    {}'.format(message))

    def output_file(self, path):
        if self.level < self.NORMAL:
            return
        self._write('    {}'.format(path))

    def blank(self):
        if self.level < self.NORMAL:
            return
        self._write('')

    def timing_table(self, stopwatch):
        """Print timing summary table (verbose only)."""
        if self.level < self.VERBOSE:
            return
        timings = stopwatch.timings
        total = stopwatch.total
        if not timings:
            return

        self.section('Timing')
        for name, elapsed in timings:
            pct = '{:>4.0f}%'.format(elapsed / total * 100) if total > 0 else ''
            self._write('    {:<18}{:>5.1f}s{:>8}'.format(name, elapsed, pct))
        self._write('    ' + '-' * 30)
        self._write('    {:<18}{:>5.1f}s'.format('Total', total))

    def _write(self, text):
        print(text, file=self.stream)
