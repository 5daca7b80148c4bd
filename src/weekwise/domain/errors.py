class InvalidSlotError(ValueError):
    """Raised when a day, hour, slot identifier or slot type is outside the schedule."""
