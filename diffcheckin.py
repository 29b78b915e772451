#!/usr/bin/env python
"""
Thin wrapper script to invoke the vc_change_analyzer CLI.

Running ``python diffcheckin.py`` is equivalent to running the
``diffcheckin`` console script installed via ``pyproject.toml``.
"""

from vc_change_analyzer.cli import main


if __name__ == "__main__":
    main(prog_name="diffcheckin")
