# topmark:header:start
#
#   project      : FileFinch
#   file         : __init__.py
#   file_relpath : src/filefinch/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileFinch CLI subcommands."""
