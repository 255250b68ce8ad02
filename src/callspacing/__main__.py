# topmark:header:start
#
#   project      : CallSpacing
#   file         : __main__.py
#   file_relpath : src/callspacing/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m callspacing``."""

from callspacing.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="callspacing")
