"""Creative Commons license names and URLs."""

LICENSE_MAPPING: dict[str, str] = {
    "CC-BY": "http://creativecommons.org/licenses/by/4.0/",
    "CC-BY-SA": "http://creativecommons.org/licenses/by-sa/4.0/",
    "CC-BY-ND": "http://creativecommons.org/licenses/by-nd/4.0/",
    "CC-BY-NC": "http://creativecommons.org/licenses/by-nc/4.0/",
    "CC-BY-NC-SA": "http://creativecommons.org/licenses/by-nc-sa/4.0/",
    "CC-BY-NC-ND": "http://creativecommons.org/licenses/by-nc-nd/4.0/",
    "CC0": "http://creativecommons.org/publicdomain/zero/1.0/",
}


def get_url_from_license(license: str) -> str:
    """Map a license name such as ``cc-by`` to its URL.

    URLs and unknown names are returned unchanged.
    """
    if license.lower().startswith(("http://", "https://")):
        return license

    normalized = license.strip().upper()
    return LICENSE_MAPPING.get(normalized, license)


def get_license_from_url(url: str) -> str:
    """Map a license URL back to its name; unknown URLs are returned unchanged."""
    normalized = url.strip().lower()
    for name, license_url in LICENSE_MAPPING.items():
        if license_url.lower() == normalized:
            return name
    return url
