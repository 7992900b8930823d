"""Path and template normalization."""


def normalize_path(path: str) -> str:
    """Strip surrounding whitespace and ensure a leading and trailing ``/``.

    ``"users/{id}"`` -> ``"/users/{id}/"``. Applying it twice changes nothing.
    """
    path = path.strip()
    if not path.endswith("/"):
        path += "/"
    if not path.startswith("/"):
        path = "/" + path
    return path
