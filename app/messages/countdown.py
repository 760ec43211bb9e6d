"""
Countdown text for the daily post.

In a break we count down to the day classes resume (the interval's end);
outside one we count down to the first day of the next break.
"""
from datetime import date

from app.calendar.clock import days_between
from app.calendar.periods import VacationCalendar
from app.calendar.resolver import (
    BeforeVacation,
    InVacation,
    ResolutionContext,
    Undetermined,
    resolve_for,
)

NOT_CONFIGURED = "Calendário de férias não configurado adequadamente."
UNKNOWN_STATE = "Não foi possível determinar o estado das férias."


def render(today: date, context: ResolutionContext, institution_name: str) -> str:
    if isinstance(context, Undetermined):
        return NOT_CONFIGURED

    if isinstance(context, InVacation):
        days = days_between(today, context.period.end)
        if days > 1:
            return f"Faltam {days} dias para o início das aulas na {institution_name} 💀"
        if days == 1:
            return f"Falta {days} dia para o início das aulas na {institution_name} 💀"
        return f"Hoje começam as aulas na {institution_name} 💀"

    if isinstance(context, BeforeVacation):
        days = days_between(today, context.period.start)
        if days > 1:
            return f"Faltam {days} dias para as férias da {institution_name}!"
        if days == 1:
            return f"Falta {days} dia para as férias da {institution_name}!"
        return f"Hoje começam as férias da {institution_name}!"

    return UNKNOWN_STATE


def build_message(today: date, calendar: VacationCalendar) -> str:
    return render(today, resolve_for(today, calendar), calendar.institution_name)
