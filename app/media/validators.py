"""
Upload validators.

Upload form fields reference validators by name, each with a list of
arguments, e.g. ``{"file_validate_extensions": ["mp3 wav ogg"]}``. Every
validator takes the uploaded MediaFile plus those arguments and returns a
list of error messages (empty when the file passes).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from django.template.defaultfilters import filesizeformat

if TYPE_CHECKING:
    from media.models import MediaFile


# =============================================================================
# Validators
# =============================================================================


def file_validate_extensions(file: "MediaFile", extensions: str) -> list[str]:
    """Check that the filename ends with one of the space-separated extensions.

    Matching is case-insensitive and anchored to the end of the original
    filename, so ``track.MP3`` passes ``"mp3"`` but ``track.mp3.exe`` does not.

    Args:
        file: Uploaded file.
        extensions: Space-separated list, e.g. ``"mp3 wav ogg"``.

    Returns:
        List with one error message, or an empty list.
    """
    allowed = [re.escape(ext) for ext in extensions.split() if ext]
    if not allowed:
        return []

    pattern = re.compile(r"\.(" + "|".join(allowed) + r")$", re.IGNORECASE)
    if pattern.search(file.original_filename):
        return []

    return [
        "Only files with the following extensions are allowed: "
        f"{' '.join(extensions.split())}."
    ]


def file_validate_size(file: "MediaFile", max_size: int) -> list[str]:
    """Check the file against a maximum size in bytes (0 means unlimited)."""
    if max_size and file.file_size > max_size:
        return [
            f"The file is {filesizeformat(file.file_size)} exceeding the "
            f"maximum file size of {filesizeformat(max_size)}."
        ]
    return []


UPLOAD_VALIDATORS: dict[str, Callable[..., list[str]]] = {
    "file_validate_extensions": file_validate_extensions,
    "file_validate_size": file_validate_size,
}


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class ValidationResult:
    """Result of running a set of upload validators against one file.

    Attributes:
        is_valid: Whether the file passed every validator.
        errors: Error messages from failing validators.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)


# =============================================================================
# Convenience Function
# =============================================================================


def validate_file(
    file: "MediaFile",
    validators: dict[str, list[Any]],
) -> ValidationResult:
    """Run named validators against a file.

    Args:
        file: Uploaded file.
        validators: Validator name to argument list.

    Returns:
        ValidationResult collecting every error.

    Raises:
        KeyError: If a validator name is not registered.
    """
    errors: list[str] = []
    for name, arguments in validators.items():
        validator = UPLOAD_VALIDATORS[name]
        errors.extend(validator(file, *arguments))
    return ValidationResult(is_valid=not errors, errors=errors)
