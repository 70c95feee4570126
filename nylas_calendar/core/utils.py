from typing import Any

ADMIN_PATH_PREFIX = "/a/"


def build_query_params(qs: dict[str, Any] | None) -> list[tuple[str, str]]:
    """Turn a query mapping into the (key, value) pairs sent on the wire."""
    if not qs:
        return []
    qs = dict(qs)
    # `expanded=True` is a shortcut for the expanded view
    if "expanded" in qs:
        if qs.pop("expanded") is True:
            qs["view"] = "expanded"
    params = []
    for key, value in qs.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            if isinstance(item, bool):
                item = "true" if item else "false"
            params.append((key, str(item)))
    return params


def is_admin_path(path: str) -> bool:
    return path.startswith(ADMIN_PATH_PREFIX)


def api_url(api_server: str, path: str) -> str:
    return f"{api_server}{path}"
