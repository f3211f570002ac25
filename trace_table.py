"""
Execution tracing for the Bare Bones interpreter.

Tracers are observers handed to the Interpreter. They are called
  - on_statement(text, index)        before a statement is dispatched
  - on_jump(target_index)            whenever `end` jumps back to its `while`
  - on_step(index, variables, loops) after a statement, with copies of the
                                     store and of the open loop frames
and must not touch the execution state.
"""
import sys
from typing import Dict, List, Optional, TextIO

from loop_stack import LoopFrame


class TraceEmitter:
    """Base tracer: every hook is a no-op."""

    def on_statement(self, text: str, index: int):
        pass

    def on_jump(self, target_index: int):
        pass

    def on_step(self, index: int, variables: Dict[str, int], loops: List[LoopFrame]):
        pass


class StreamTracer(TraceEmitter):
    """Writes the classic verbose trace lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, show_variables: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.show_variables = show_variables

    def on_statement(self, text, index):
        self.stream.write(f'processing statement "{text}" at line {index + 1}: \n')

    def on_jump(self, target_index):
        self.stream.write(f"go to line number {target_index + 1}\n")

    def on_step(self, index, variables, loops):
        if not self.show_variables:
            return
        for name, value in variables.items():
            self.stream.write(f"    {name}= {value}\n")
        for frame in loops:
            self.stream.write(f"    {frame}\n")
        self.stream.write("\n")


class TraceFanout(TraceEmitter):
    """Forward every hook to several tracers, in order."""

    def __init__(self, tracers):
        self.tracers = list(tracers)

    def on_statement(self, text, index):
        for t in self.tracers:
            t.on_statement(text, index)

    def on_jump(self, target_index):
        for t in self.tracers:
            t.on_jump(target_index)

    def on_step(self, index, variables, loops):
        for t in self.tracers:
            t.on_step(index, variables, loops)


class TraceRecorder(TraceEmitter):
    """Records one row per executed statement for a trace table."""

    def __init__(self, max_rows: Optional[int] = None):
        self.trace: List[dict] = []
        self.max_rows = max_rows
        self._pending = None

    def on_statement(self, text, index):
        self._pending = {
            'step': len(self.trace) + 1,
            'line': index + 1,
            'statement': text.strip(),
            'note': "",
            'depth': 0,
            'variables': {},
        }

    def on_jump(self, target_index):
        if self._pending is not None:
            self._pending['note'] = f"go to {target_index + 1}"

    def on_step(self, index, variables, loops):
        if self._pending is None:
            return
        self._pending['variables'] = dict(variables)
        self._pending['depth'] = len(loops)
        if self.max_rows is None or len(self.trace) < self.max_rows:
            self.trace.append(self._pending)
        self._pending = None

    def get_all_var_names(self) -> List[str]:
        """Variable columns in order of first appearance."""
        names = []
        for entry in self.trace:
            for name in entry['variables']:
                if name not in names:
                    names.append(name)
        return names

    def format_trace_text(self) -> str:
        """Format the trace as an ASCII table; unchanged values are left blank."""
        if not self.trace:
            return "No trace data recorded."
        var_names = self.get_all_var_names()
        headers = ['Step', 'Line', 'Statement', 'Note', 'Depth'] + var_names
        return _format_ascii_table(headers, _build_rows(self.trace, var_names),
                                   text_columns={2, 3})


def _build_rows(trace, var_names):
    rows = []
    prev_values = {}
    for entry in trace:
        row = [str(entry['step']), str(entry['line']), entry['statement'],
               entry['note'], str(entry['depth'])]
        for vn in var_names:
            val = entry['variables'].get(vn)
            if val is None:
                row.append('')
                prev_values.pop(vn, None)
            elif prev_values.get(vn) != val:
                row.append(str(val))
                prev_values[vn] = val
            else:
                row.append('')  # Unchanged
        rows.append(row)
    return rows


def _format_ascii_table(headers, rows, text_columns=frozenset()):
    """Render a boxed table sized to its widest cells.

    Columns listed in `text_columns` are left-aligned, the rest hold
    numbers and are right-aligned.
    """
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

    def render(cells):
        padded = [cell.ljust(w) if i in text_columns else cell.rjust(w)
                  for i, (cell, w) in enumerate(zip(cells, widths))]
        return '| ' + ' | '.join(padded) + ' |'

    rule = '+' + '+'.join('-' * (w + 2) for w in widths) + '+'
    return '\n'.join([rule, render(headers), rule] + [render(r) for r in rows] + [rule])
