class GenwunError(Exception):
    """Base for internal errors."""


class InvalidStatError(GenwunError, ValueError):
    """Accuracy or Evasion was queried as a raw stat value."""

    def __init__(self, stat: object, detail: str = "has no raw value"):
        super().__init__(f"Stat '{stat}' {detail}")
        self.stat = stat
        self.detail = detail


class InvalidConditionError(GenwunError, ValueError):
    pass


class RandomSourceError(GenwunError):
    pass
