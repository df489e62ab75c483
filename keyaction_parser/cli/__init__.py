"""Command-line interfaces to the library.

This package provides command-line programs using the library, for checking
and inspecting files of keybinding actions with one action per line.

For now, all such CLI programs are prefixed with 'ka'.
"""
