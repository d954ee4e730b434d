def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().lower()


def to_async_postgres_url(url: str | None, driver: str = "asyncpg") -> str | None:
    """
    Rewrite a hosted Postgres connection string so SQLAlchemy picks the async driver.

    Hosting providers hand out `postgres://...` or `postgresql://...` URLs; the async
    engine needs `postgresql+<driver>://...`. URLs that already name a driver (or that
    point at another backend, e.g. sqlite) are returned unchanged.
    """
    if url is None:
        return None

    url = url.strip()
    if not url:
        return None

    for scheme in ("postgres://", "postgresql://"):
        if url.startswith(scheme):
            return f"postgresql+{driver}://" + url[len(scheme):]
    return url
