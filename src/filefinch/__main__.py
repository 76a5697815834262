# topmark:header:start
#
#   project      : FileFinch
#   file         : __main__.py
#   file_relpath : src/filefinch/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FileFinch via ``python -m filefinch``.

Delegates to `filefinch.cli.main.cli`, the same entry point as the
``filefinch`` console script.

Examples:
    Detect a couple of files::

        python -m filefinch detect roads.gpkg table.csv
"""

from __future__ import annotations

from filefinch.cli.main import cli

if __name__ == "__main__":
    cli()
