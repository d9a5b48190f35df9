"""
Online Store Resources
Pages, blogs, redirects, script tags, themes and theme assets.
"""

from typing import TYPE_CHECKING, List

from ..models import Asset, Blog, Page, Redirect, ScriptTag, Theme
from .base import (
    CreatableResource,
    CRUDResource,
    DeletableResource,
    GettableResource,
    ListableResource,
    Payload,
    Resource,
    UpdatableResource,
)
from .metafields import MetafieldsMixin

if TYPE_CHECKING:
    from ..client import ShopifyAdminClient, QueryParams


class PageResource(CRUDResource, MetafieldsMixin):
    """Online store pages"""
    path = "pages"
    singular = "page"
    plural = "pages"
    model = Page


class BlogResource(CRUDResource, MetafieldsMixin):
    """Online store blogs"""
    path = "blogs"
    singular = "blog"
    plural = "blogs"
    model = Blog


class RedirectResource(CRUDResource):
    path = "redirects"
    singular = "redirect"
    plural = "redirects"
    model = Redirect


class ScriptTagResource(CRUDResource):
    path = "script_tags"
    singular = "script_tag"
    plural = "script_tags"
    model = ScriptTag


class AssetResource(Resource):
    """
    Assets of one theme (themes/{id}/assets).

    Assets have no numeric id; they are addressed by key (e.g.
    "templates/index.liquid") through query parameters.
    """
    path = "assets"
    singular = "asset"
    plural = "assets"
    model = Asset

    def __init__(self, client: "ShopifyAdminClient", theme_id: int):
        super().__init__(client, prefix=f"themes/{theme_id}")
        self.theme_id = theme_id

    async def list(self, options: "QueryParams" = None) -> List[Asset]:
        """List asset metadata (values are not included)"""
        data = await self.client.get(self._path(), options)
        return self._parse_list(data)

    async def get(self, key: str) -> Asset:
        """Get an asset, including its value, by key"""
        data = await self.client.get(
            self._path(), params={"asset[key]": key, "theme_id": self.theme_id}
        )
        return self._parse(data)

    async def update(self, asset: Payload) -> Asset:
        """Create or replace an asset"""
        data = await self.client.put(self._path(), self._wrap(asset))
        return self._parse(data)

    async def delete(self, key: str) -> None:
        """Delete an asset by key"""
        await self.client.delete(self._path(), params={"asset[key]": key})


class ThemeResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    """Online store themes"""
    path = "themes"
    singular = "theme"
    plural = "themes"
    model = Theme

    def assets(self, theme_id: int) -> AssetResource:
        """Assets of the given theme"""
        return AssetResource(self.client, theme_id)
