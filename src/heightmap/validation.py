"""Pre-generation parameter validation."""

import logging
import math

from .config import GenerationParameters
from .exceptions import InvalidParametersError

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of parameter validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_parameters(params: GenerationParameters) -> ValidationResult:
    """Check generation parameters against their contract.

    Errors make generation impossible (division by zero, no grid shape);
    warnings flag valid but degenerate settings.

    Args:
        params: Parameters to check.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    # Check 1: Finite floats
    _check_finite(params, result)

    # Check 2: Grid shape
    if params.width <= 0:
        result.add_error(f"width must be positive, got {params.width}")
    if params.height <= 0:
        result.add_error(f"height must be positive, got {params.height}")

    # Check 3: Sample coordinate scale
    if params.noise_scale == 0:
        result.add_error("noise_scale must be non-zero")
    elif params.noise_scale < 0:
        result.add_warning("noise_scale is negative; sample space is mirrored")

    # Check 4: Elevation range
    if params.min_elevation >= params.max_elevation:
        result.add_error(
            f"min_elevation ({params.min_elevation}) must be less than "
            f"max_elevation ({params.max_elevation})"
        )
    elif not params.min_elevation <= 0 <= params.max_elevation:
        result.add_warning(
            "0 lies outside [min_elevation, max_elevation]; "
            "normalized range collapses to a single value"
        )

    # Check 5: Counts
    if params.octave_count < 0:
        result.add_error(f"octave_count must be non-negative, got {params.octave_count}")
    elif params.octave_count == 0:
        result.add_warning("octave_count is 0; base field is flat")
    if params.bump_count < 0:
        result.add_error(f"bump_count must be non-negative, got {params.bump_count}")

    # Check 6: Octave variation
    if params.octave_count > 1:
        if params.persistence == 0:
            result.add_warning("persistence is 0; only the first octave contributes")
        elif abs(params.persistence) > 1:
            result.add_warning("persistence magnitude > 1; amplitude grows per octave")
        if params.lacunarity == 1:
            result.add_warning("lacunarity is 1; every octave samples the same frequency")

    return result


def require_valid(params: GenerationParameters) -> None:
    """Validate parameters and raise on any error.

    Raises:
        InvalidParametersError: Listing every error found.
    """
    result = validate_parameters(params)
    for warning in result.warnings:
        logger.warning(f"Parameter warning: {warning}")
    if not result.passed:
        raise InvalidParametersError(result.errors)


def _check_finite(params: GenerationParameters, result: ValidationResult) -> None:
    """Check that every float parameter is finite."""
    values = {
        "noise_scale": params.noise_scale,
        "min_elevation": params.min_elevation,
        "max_elevation": params.max_elevation,
        "persistence": params.persistence,
        "lacunarity": params.lacunarity,
        "offset.x": params.offset.x,
        "offset.y": params.offset.y,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            result.add_error(f"{name} must be finite, got {value}")
