"""
taskbuddy: a personal task tracker driven by short text commands.

Subpackages:
- tasks/: task model, ordered task collection, flat-file storage
- core/: command parser, typed commands, session entry point
- connectors/: console front end
- cli/: composition root and process entry point
"""

__version__ = "0.1.0"
