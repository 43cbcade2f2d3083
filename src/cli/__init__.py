"""Command-line interface: REPL entrypoint and input line handler."""
