"""
Shopify Helpers
Shop-name normalisation and sub-resource path prefixes shared by the
client and the resource modules.
"""

from urllib.parse import urlparse

MYSHOPIFY_SUFFIX = ".myshopify.com"


def shop_full_name(name: str) -> str:
    """Return the full shop name, including .myshopify.com"""
    name = name.strip()

    # Remove protocol and path if a URL was pasted in
    if name.startswith(("http://", "https://")):
        parsed = urlparse(name)
        name = parsed.netloc or parsed.path
    name = name.split("/")[0]

    name = name.strip(".")
    if not name:
        return name
    if "myshopify.com" in name:
        return name
    return f"{name}{MYSHOPIFY_SUFFIX}"


def shop_short_name(name: str) -> str:
    """Return the short shop name, excluding .myshopify.com"""
    return shop_full_name(name).replace(MYSHOPIFY_SUFFIX, "")


def shop_base_url(name: str) -> str:
    """Return the shop's base URL"""
    return f"https://{shop_full_name(name)}"


def metafield_path_prefix(resource: str = "", resource_id: int = None) -> str:
    """
    Path prefix for metafield endpoints.

    Shop-level metafields live at ``metafields``; metafields owned by
    another resource live at ``{resource}/{id}/metafields``.
    """
    if resource:
        return f"{resource}/{resource_id}/metafields"
    return "metafields"


def fulfillment_path_prefix(resource: str = "", resource_id: int = None) -> str:
    """Path prefix for fulfillment endpoints, same layout as metafields"""
    if resource:
        return f"{resource}/{resource_id}/fulfillments"
    return "fulfillments"
