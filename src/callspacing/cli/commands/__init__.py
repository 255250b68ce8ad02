# topmark:header:start
#
#   project      : CallSpacing
#   file         : __init__.py
#   file_relpath : src/callspacing/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the CallSpacing CLI."""
