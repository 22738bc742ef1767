# topmark:header:start
#
#   project      : JDocFmt
#   file         : __init__.py
#   file_relpath : src/jdocfmt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JDocFmt CLI subcommands."""
