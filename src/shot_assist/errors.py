"""Error types raised by detection, tracking and aiming."""


class ShotAssistError(Exception):
    """Base class for all shot assist failures."""


class CaptureError(ShotAssistError):
    """Screen capture failed (connection or protocol error).

    Fatal to the current detection or tracking call. Never retried.
    """


class InsufficientData(ShotAssistError):
    """Captured frame is shorter than the template being matched."""


class DegenerateVector(ShotAssistError):
    """Aim vector has zero length (origin and target coincide)."""


class InputError(ShotAssistError):
    """Synthetic pointer input is unavailable (no display or no XTEST)."""
