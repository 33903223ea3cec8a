class ConstraintsUnsatisfiable(RuntimeError):
    """Raised when a point cannot be placed within the configured max_attempts."""

    def __init__(self, accepted: int, attempts: int):
        self.accepted = accepted
        self.attempts = attempts
        super().__init__(
            f"Gave up after {attempts} rejected candidates with {accepted} points placed; "
            f"min_distance / min_center_distance are too large for the requested count"
        )
