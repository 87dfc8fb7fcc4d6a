"""
ShellSim - An In-Process POSIX-like Shell Simulator

A shell that runs entirely inside the Python process:
- Tokenizer with quoting, escaping and curly-brace grouping
- Variable, home-directory and glob expansion
- Option, argument and redirection parsing
- In-memory hierarchical file system with text file streams

Version: 1.0.0
"""

__version__ = "1.0.0"
