"""
Command core (transport-agnostic).

Components:
- dates.py: strict date grammar, due-date shortcuts, date formats
- parser.py: raw line -> typed command
- commands.py: typed commands applied to AppState
- session.py: parse + execute + error recovery for one input line
"""
