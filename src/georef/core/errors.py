"""
Custom exception hierarchy for the georef engine.

Geometric and catalog "no answer" conditions (unknown code, no detection
match, non-converging geodesic) are represented by ``None`` or ``nan`` and
never raise. The exceptions below are reserved for contract violations and
for internal failures that callers may want to inspect.
"""

from typing import Any, Dict, List, Optional


class GeorefException(Exception):
    """
    Base exception for all georef-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeorefException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class ValidationError(GeorefException):
    """
    Raised when an argument falls outside its documented domain.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: str = "VALIDATION_ERROR",
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=suggestions or ["Check the input values and try again"],
        )


class ZoneOutOfRangeError(ValidationError, ValueError):
    """
    Raised when a projection zone number is outside its valid range.

    Also a ``ValueError`` so callers can treat it like any other bad argument.
    """

    def __init__(
        self,
        zone: int,
        minimum: int,
        maximum: int,
        family: str,
    ):
        """
        Initialize ZoneOutOfRangeError.

        Args:
            zone: The rejected zone number
            minimum: Smallest accepted zone number
            maximum: Largest accepted zone number
            family: Name of the projection family the zone belongs to
        """
        super().__init__(
            message=f"{family} zone must be between {minimum} and {maximum}, got {zone}",
            field="zone",
            details={"zone": zone, "minimum": minimum, "maximum": maximum, "family": family},
            suggestions=[f"Use a {family} zone between {minimum} and {maximum}"],
            error_code="ZONE_OUT_OF_RANGE",
        )
        self.zone = zone


class CRSError(GeorefException):
    """
    Raised when a coordinate reference system operation fails.
    """

    def __init__(
        self,
        message: str,
        crs_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: str = "CRS_ERROR",
    ):
        error_details = details or {}
        if crs_code:
            error_details["crs_code"] = crs_code

        default_suggestions = [
            "Verify the coordinate reference system is in the catalog",
            "Check the EPSG code is valid",
        ]

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class TransformationError(CRSError):
    """Raised when a coordinate conversion cannot be performed."""

    def __init__(
        self,
        message: str,
        crs_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            crs_code=crs_code,
            details=details,
            suggestions=["Ensure coordinates and CRS record are provided"],
            error_code="TRANSFORMATION_ERROR",
        )


class ReferenceUnavailableError(CRSError):
    """Raised when the PROJ reference cannot evaluate a CRS."""

    def __init__(
        self,
        message: str,
        crs_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            crs_code=crs_code,
            details=details,
            suggestions=["Reference checks require a record with a known EPSG id"],
            error_code="REFERENCE_UNAVAILABLE",
        )


class CatalogError(GeorefException):
    """
    Raised when an external CRS catalog file cannot be used.

    The catalog catches this and falls back to the compiled-in table.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if file_path:
            error_details["file_path"] = file_path

        super().__init__(
            message=message,
            error_code="CATALOG_ERROR",
            details=error_details,
            suggestions=[
                "Verify the catalog file is a JSON array of CRS records",
                "Remove the file to use the built-in catalog",
            ],
        )


class ConfigurationError(GeorefException):
    """
    Raised when engine configuration is invalid.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=[
                "Check GEOREF_* environment variables are set correctly",
                "Verify .env file syntax",
            ],
        )
