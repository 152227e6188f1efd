"""Settings and logging for the typedconf command-line tool.

Library users never need this package: it only configures the CLI.
"""
