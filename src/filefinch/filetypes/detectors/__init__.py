# topmark:header:start
#
#   project      : FileFinch
#   file         : __init__.py
#   file_relpath : src/filefinch/filetypes/detectors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Window matchers for FileFinch detection rules.

Each module groups the predicates for one family of signatures:

- `filefinch.filetypes.detectors.magic`: fixed magic bytes at known offsets
  (and trailing signatures for footer-bracketed formats);
- `filefinch.filetypes.detectors.archive`: ZIP containers, told apart by member names;
- `filefinch.filetypes.detectors.text`: text heuristics.

Matchers are plain functions taking a `ByteWindow`; the registry in
`filefinch.filetypes.instances` decides their order.
"""

from __future__ import annotations
