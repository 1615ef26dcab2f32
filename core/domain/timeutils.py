from datetime import datetime, timedelta, timezone

# BSON dates store milliseconds; everything we persist is truncated to match.
ONE_MILLISECOND = timedelta(milliseconds=1)


def normalize_timestamp(value: datetime) -> datetime:
    """
    Lleva un datetime a UTC con precisión de milisegundos.

    Los datetime sin zona horaria se interpretan como UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utc_now() -> datetime:
    return normalize_timestamp(datetime.now(timezone.utc))


def next_update_stamp(previous: datetime) -> datetime:
    """Devuelve un updatedAt estrictamente posterior a `previous`."""
    now = utc_now()
    if now <= previous:
        return previous + ONE_MILLISECOND
    return now
