"""
nonosolve: line-constraint grid puzzle (nonogram) solver.

Key components:
  - core: Grid types, run-length helpers and puzzle JSON IO
  - lines: LineSpec and the block placement enumerator
  - solver: Row automaton, backtracking search and puzzle adapter
  - runners: Diagnostics and command-line entrypoints
"""

__version__ = "0.1.0"
