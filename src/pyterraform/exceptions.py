"""Custom exceptions for pyterraform.

This module defines a small hierarchy of exceptions shared by the
Terraform wrapper, the configuration loader and the CLI.
"""


class PyterraformError(Exception):
    """Base exception for all pyterraform errors.

    Parameters
    ----------
    message : str
        Error message describing what went wrong.
    details : dict, optional
        Additional structured information about the error.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        """Format error message with optional details.

        Returns
        -------
        str
            Formatted error message.
        """
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class TerraformCommandError(PyterraformError):
    """A terraform invocation wrote to its error stream.

    Any data on stderr marks the run as failed, whatever the exit code.
    The full combined output is kept on the exception.

    Parameters
    ----------
    output : str
        Concatenated stdout and stderr text of the run.
    command : str, optional
        Command line that was executed.
    returncode : int, optional
        Process exit code, if the process ran at all.

    Attributes
    ----------
    output : str
        Concatenated stdout and stderr text.
    command : str or None
        Command line that was executed.
    returncode : int or None
        Process exit code.
    """

    def __init__(self, output: str, command: str = None, returncode: int = None):
        super().__init__(f"Error while executing terraform command : [{output}]")
        self.output = output
        self.command = command
        self.returncode = returncode


class TerraformVersionError(PyterraformError):
    """No version string could be found in `terraform version` output."""

    pass


class ConfigError(PyterraformError):
    """Configuration loading error.

    Raised when:
    - A configuration file cannot be read
    - A configuration file contains invalid YAML
    - A configuration file does not hold a mapping
    """

    pass
