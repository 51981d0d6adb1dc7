"""Helpers for reading whole result sets through protean query sets."""


def fetch_all(queryset) -> list:
    """Every entity matching ``queryset``.

    A protean query set applies a default page size, so a first page that
    reports more matches than it holds is re-read with the limit raised to the
    reported total.
    """
    result = queryset.all()
    if result.total > len(result.items):
        result = queryset.limit(result.total).all()
    return result.items
