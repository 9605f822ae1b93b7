"""Unified exception hierarchy for phaseconf.

All custom exceptions inherit from PhaseConfError for consistent error handling.
CLI catches these and converts to user-friendly messages via click.ClickException.

Assembling a phase specification does not raise for well-formed input; these
errors come from validating the execution context before a build starts.

Dependency direction:
    This module has NO internal dependencies (leaf module).
    It may be imported by: all other phaseconf modules.
    It should NOT import from any other phaseconf modules.
"""

from __future__ import annotations


class PhaseConfError(Exception):
    """Base exception for all phaseconf errors.

    All phaseconf-specific exceptions should inherit from this class.
    This enables consistent error handling at the CLI layer.
    """


class ValidationError(PhaseConfError):
    """Input validation errors.

    Examples:
        - Empty phase name
        - Empty builder image or volume name
        - Unknown target OS
        - Malformed platform API version
    """
