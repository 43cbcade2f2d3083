"""Command-line parsing.

Raw input lines are split into a command word and prefixed arguments, validated, and turned into
executable command objects. Every parse failure is reported as `ParseError`.
"""
