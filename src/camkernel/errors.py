"""Camera kernel error types."""


class CameraError(ValueError):
    """Base class for all camera kernel errors."""


class DimensionMismatchError(CameraError):
    """An operand does not have the shape an operation requires."""


class DegenerateGeometryError(CameraError):
    """Look-at parameters do not define a valid camera basis."""


class InvalidCalibrationError(CameraError):
    """Focal length or image dimensions are out of range."""


class SingularProjectionError(CameraError):
    """Perspective divide (or its inverse) is undefined for the given point."""


class CameraConfigError(CameraError):
    """Camera configuration is malformed."""
