"""
Locale-aware formatting for rendered pages.

Each Locale carries its own formatting rules (date style, fraction
digits); Babel supplies the CLDR data behind them.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from babel import dates, numbers

from app.i18n.locale import Locale


def _as_datetime(value: date | datetime | str) -> date | datetime:
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


def number_pattern(locale: Locale) -> str:
    """CLDR decimal pattern honouring the locale's min/max fraction digits."""
    pattern = "#,##0"
    if locale.max_fraction_digits > 0:
        optional = max(locale.max_fraction_digits - locale.min_fraction_digits, 0)
        pattern += "." + "0" * locale.min_fraction_digits + "#" * optional
    return pattern


def date_pattern(locale: Locale) -> str:
    """CLDR pattern behind the locale's date style, e.g. "MMMM d, y" for en long."""
    return dates.get_date_format(locale.date_format, locale=locale.babel_locale).pattern


def format_date(
    value: date | datetime | str,
    locale: Locale,
    format: str | None = None,
    tz: str | None = None,
) -> str:
    """
    Format a date the way the locale writes it ("October 17, 2026" /
    "17 de outubro de 2026" for the default long style).

    Aware datetimes are converted to `tz` first so a post published late in
    the evening is not shown with the next day's date.
    """
    value = _as_datetime(value)
    if tz and isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(dates.get_timezone(tz))
    return dates.format_date(value, format=format or locale.date_format, locale=locale.babel_locale)


def format_number(value: int | float, locale: Locale) -> str:
    return numbers.format_decimal(value, format=number_pattern(locale), locale=locale.babel_locale)


def get_relative_time(value: datetime | str, locale: Locale, now: datetime | None = None) -> str:
    """"2 hours ago" / "há 2 horas". Naive datetimes are taken as UTC."""
    value = _as_datetime(value)
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return dates.format_timedelta(
        value - now,
        add_direction=True,
        threshold=1,
        locale=locale.babel_locale,
    )


def formatting_context(locale: Locale, tz: str | None = None, now: datetime | None = None) -> dict[str, str]:
    """
    Formatting rules a template needs for one locale.

    `today` is the current date as the locale writes it, in the site's
    timezone `tz`.
    """
    now = now or datetime.now(timezone.utc)
    return {
        "babel_locale": locale.babel_locale,
        "timezone": tz or "UTC",
        "date_pattern": date_pattern(locale),
        "number_pattern": number_pattern(locale),
        "today": format_date(now, locale, tz=tz),
    }
