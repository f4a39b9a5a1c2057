"""
Custom exceptions for sii-catalog with helpful error messages.

Per-file and per-folder parse failures never raise; these exceptions only
cover the configuration and command-line boundary.
"""


class SiiCatalogError(Exception):
    """Base exception for sii-catalog errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class ConfigurationError(SiiCatalogError):
    """Configuration file errors."""

    pass


class ConfigNotFoundError(ConfigurationError):
    """Configuration file does not exist."""

    def __init__(self, path: str):
        message = f"Configuration file not found: {path}"
        suggestion = (
            "Create a default configuration with:\n"
            "  sii-catalog init <directory>\n\n"
            "Or run without --config to use the built-in defaults."
        )
        super().__init__(message, suggestion)


class ConfigAlreadyExistsError(ConfigurationError):
    """Configuration file already exists at target location."""

    def __init__(self, path: str):
        message = f"Configuration already exists at: {path}"
        suggestion = "Re-run with --force to overwrite it, or choose a different directory."
        super().__init__(message, suggestion)


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"

        suggestion = (
            "Fix the sii-catalog.yaml file.\n"
            "You can regenerate the default configuration:\n"
            "  mv sii-catalog.yaml sii-catalog.yaml.backup\n"
            "  sii-catalog init .\n\n"
            "Then merge your settings back from the backup."
        )
        super().__init__(message, suggestion)


class ScanError(SiiCatalogError):
    """Errors while scanning the definition tree or writing its output."""

    pass


class ScanRootNotFoundError(ScanError):
    """The truck definition root does not exist."""

    def __init__(self, path: str):
        message = f"Definition root not found: {path}"
        suggestion = (
            "Point the scan at an extracted def/vehicle/truck folder:\n"
            "  sii-catalog scan --root <path/to/def/vehicle/truck>\n\n"
            "Or set scan.root in sii-catalog.yaml."
        )
        super().__init__(message, suggestion)


class OutputWriteError(ScanError):
    """The output document could not be serialized or written."""

    def __init__(self, path: str):
        message = f"Failed to write output document: {path}"
        suggestion = (
            "Check that the output directory is writable:\n"
            f"  ls -ld $(dirname {path})\n\n"
            "Run with --verbose for the underlying error."
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, SiiCatalogError):
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {str(error)}"
