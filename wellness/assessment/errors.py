"""Domain errors. Anything raised from here is fatal for the run."""


class WellnessError(Exception):
    pass


class InputClosedError(WellnessError):
    """Standard input ended before every profile field was answered."""


class UnknownActivityLevelError(WellnessError):
    def __init__(self, level: object) -> None:
        super().__init__(f"No activity multiplier for {level!r}")
        self.level = level


class MetricsNotCalculatedError(WellnessError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Profile field {field!r} has not been calculated yet")
        self.field = field
