# topmark:header:start
#
#   file         : __init__.py
#   file_relpath : src/filefinch/filetypes/__init__.py
#   project      : FileFinch
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format registry and detection rules for FileFinch.

This package defines the `FileType` verdict, the `ByteWindow` the rules read,
the per-format matchers, and the ordered registry that encodes rule priority.
"""
