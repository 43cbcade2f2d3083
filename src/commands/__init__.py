"""Executable commands produced by the command-line parser."""
