#!/usr/bin/env python3
"""
Main CLI for System Font Fallback
=================================

Resolves system fonts and shows how they would be applied to a rendering
context. Same as the installed ``sysfonts`` command.
"""

from sysfonts.cli import cli

if __name__ == "__main__":
    cli()
