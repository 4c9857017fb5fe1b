"""Subcommands of the ``fieldcheck`` CLI, added to the root group in cli.py."""
