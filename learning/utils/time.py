from django.utils import timezone


def to_local_iso(dt_utc):
    """Render a stored UTC timestamp in the configured TIME_ZONE."""
    return timezone.localtime(dt_utc).isoformat()


def ensure_aware(dt):
    """Naive timestamps are taken to be in the configured TIME_ZONE."""
    if timezone.is_naive(dt):
        return timezone.make_aware(dt)
    return dt
