import re

_MAJOR_RE = re.compile(r"^\s*(\d+)")


def _major(version: str) -> int | None:
    # versions look like "2.1" or "2-beta"
    match = _MAJOR_RE.match(version.split("-")[0])
    return int(match.group(1)) if match else None


def get_warning_for_version(sdk_api_version: str | None, api_version: str | None) -> str:
    """Describe a mismatch between the API version the SDK targets and the server's one."""
    if sdk_api_version == api_version or not sdk_api_version or not api_version:
        return ""
    warning = (
        "WARNING: SDK version may not support your Nylas API version."
        f" SDK supports version {sdk_api_version} of the API and your application"
        f" is currently running on version {api_version} of the API."
    )
    api_num = _major(api_version)
    sdk_num = _major(sdk_api_version)
    if api_num is None or sdk_num is None:
        return warning
    if sdk_num > api_num:
        warning += (
            " Please update the version of the API that your application is using"
            " through the developer dashboard."
        )
    elif api_num > sdk_num:
        warning += " Please update the sdk to ensure it works properly."
    return warning
