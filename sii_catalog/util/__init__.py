"""
Utility functions and helpers.

Modules:
- files: directory listing and text writing helpers
- progress: rich progress bars and summaries for the CLI
"""
