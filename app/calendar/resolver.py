from dataclasses import dataclass
from datetime import date

from app.calendar.periods import ConcreteInterval, VacationCalendar, generate_intervals


@dataclass(frozen=True)
class InVacation:
    period: ConcreteInterval


@dataclass(frozen=True)
class BeforeVacation:
    period: ConcreteInterval


@dataclass(frozen=True)
class Undetermined:
    pass


ResolutionContext = InVacation | BeforeVacation | Undetermined


def resolve(today: date, intervals: list[ConcreteInterval]) -> ResolutionContext:
    """
    Classify today against the generated intervals.

    Inside a break: the containing interval that ends soonest (overlapping
    templates are a config mistake, but the nearest return to class wins).
    Otherwise: the upcoming interval that starts soonest. With nothing ahead,
    Undetermined.
    """
    containing = [i for i in intervals if i.contains(today)]
    if containing:
        return InVacation(min(containing, key=lambda i: i.end))

    upcoming = [i for i in intervals if i.start > today]
    if not upcoming:
        return Undetermined()

    return BeforeVacation(min(upcoming, key=lambda i: i.start))


def resolve_for(today: date, calendar: VacationCalendar) -> ResolutionContext:
    return resolve(today, generate_intervals(today.year, calendar.periods))
