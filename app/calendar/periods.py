from dataclasses import dataclass
from datetime import date

from app.config import settings


@dataclass(frozen=True)
class VacationPeriodTemplate:
    """Recurring break described by (month, day) bounds, independent of year."""

    name: str
    start: tuple[int, int]
    end: tuple[int, int]
    crosses_year: bool = False


@dataclass(frozen=True)
class ConcreteInterval:
    """A template materialised for one year. Half-open: [start, end)."""

    name: str
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end


@dataclass(frozen=True)
class VacationCalendar:
    institution_name: str
    periods: tuple[VacationPeriodTemplate, ...]


# Vacation windows: months are 1-based.
# Year-crossing windows (Dec→Jan) end in the following calendar year.
VACATION_PERIODS = (
    VacationPeriodTemplate("férias de meio de ano", start=(7, 15), end=(8, 1)),
    VacationPeriodTemplate("férias de fim de ano", start=(12, 5), end=(1, 26), crosses_year=True),
)


def build_calendar(
    institution_name: str | None = None,
    periods: tuple[VacationPeriodTemplate, ...] = VACATION_PERIODS,
) -> VacationCalendar:
    return VacationCalendar(
        institution_name=institution_name or settings.institution_name,
        periods=tuple(periods),
    )


def generate_intervals(
    reference_year: int, periods: tuple[VacationPeriodTemplate, ...] | list[VacationPeriodTemplate]
) -> list[ConcreteInterval]:
    """
    Expand every template over the previous, current and next year.

    Three base years are enough for a year-crossing break that started last
    December to still be found in January. Bad month/day pairs raise
    ValueError straight from date().
    """
    intervals: list[ConcreteInterval] = []
    for base_year in (reference_year - 1, reference_year, reference_year + 1):
        for period in periods:
            end_year = base_year + 1 if period.crosses_year else base_year
            intervals.append(
                ConcreteInterval(
                    name=period.name,
                    start=date(base_year, *period.start),
                    end=date(end_year, *period.end),
                )
            )
    return intervals
