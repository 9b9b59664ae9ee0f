from __future__ import annotations


class SpendShareError(Exception):
    """Base class for errors raised by the calculation core."""


class UnknownFilingStatusError(SpendShareError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown filing status {value!r}; expected 'single' or 'married'")


class UnknownCategoryError(SpendShareError, KeyError):
    def __init__(self, key: object, known: tuple[str, ...] = ()) -> None:
        self.key = key
        self.known = known
        message = f"Unknown funding category {key!r}"
        if known:
            message += f"; expected one of: {', '.join(known)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class UnsupportedDataYearError(SpendShareError, ValueError):
    def __init__(self, year: object, supported: tuple[int, ...] = ()) -> None:
        self.year = year
        self.supported = supported
        years = ", ".join(str(y) for y in supported) or "none"
        super().__init__(f"No reference data for year {year!r} (supported: {years})")


class ReferenceDataError(SpendShareError):
    """A static table is malformed, e.g. a category with an unknown tax source."""


__all__ = [
    "ReferenceDataError",
    "SpendShareError",
    "UnknownCategoryError",
    "UnknownFilingStatusError",
    "UnsupportedDataYearError",
]
