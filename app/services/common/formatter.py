"""Human readable formatting of metric values."""

SECONDS_IN_DAY = 86400
SECONDS_IN_YEAR = SECONDS_IN_DAY * 365.25


def _format_seconds(seconds: float) -> str:
    precision = 3 if 0 < seconds < 0.01 else 2
    text = f"{round(seconds, precision):.{precision}f}"
    return text.rstrip("0").rstrip(".")


class MetricsFormatter:
    """Formats durations for display."""

    def pretty_duration(self, seconds: int | float) -> str:
        """Duration as a short sentence, keeping the two largest units.

        3723 -> "1 hours 2 min", 200 -> "3 min 20s", 45 -> "45s".
        """
        seconds = float(seconds)
        sign = "-" if seconds < 0 else ""
        seconds = abs(seconds)

        years = int(seconds // SECONDS_IN_YEAR)
        seconds -= years * SECONDS_IN_YEAR
        days = int(seconds // SECONDS_IN_DAY)
        seconds -= days * SECONDS_IN_DAY
        hours = int(seconds // 3600)
        seconds -= hours * 3600
        minutes = int(seconds // 60)
        seconds -= minutes * 60

        if years:
            text = f"{years} years {days} days"
        elif days:
            text = f"{days} days {hours} hours"
        elif hours:
            text = f"{hours} hours {minutes} min"
        elif minutes:
            text = f"{minutes} min {_format_seconds(seconds)}s"
        else:
            text = f"{_format_seconds(seconds)}s"
        return sign + text
