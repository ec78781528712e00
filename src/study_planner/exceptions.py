"""Custom exceptions for the study planner."""


class PlannerError(Exception):
    """Base exception for study planner errors."""

    pass


class UnknownUnitError(PlannerError):
    """Unit code not present in the catalog."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unit '{code}' not found in catalog")


class UnitNotOfferedError(PlannerError):
    """Unit has no offering in any semester of the year."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(
            f"Unit '{code}' is not offered in any semester. "
            "Every catalog unit must list at least one offering."
        )


class InvalidSemesterError(PlannerError):
    """Semester text could not be interpreted."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Invalid semester: '{text}'. Expected YEAR/OFFERING, e.g. 2021/1, 2021/2 or 2021/S"
        )


class InvalidPlanError(PlannerError):
    """Study plan data is malformed."""

    def __init__(self, message: str, code: str | None = None):
        self.code = code
        location = f" for unit '{code}'" if code else ""
        super().__init__(f"Invalid study plan{location}: {message}")


class CatalogError(PlannerError):
    """Catalog data could not be loaded."""

    def __init__(self, message: str, source: str | None = None, code: str | None = None):
        self.source = source
        self.code = code
        location = ""
        if source:
            location += f" in '{source}'"
        if code:
            location += f" for unit '{code}'"
        super().__init__(f"Invalid catalog data{location}: {message}")


class PrereqSyntaxError(CatalogError):
    """Prerequisite expression text is malformed."""

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"cannot parse prerequisite '{text}' at position {position}: {reason}")
