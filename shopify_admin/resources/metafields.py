"""
Metafield Resources
Shop-level metafields and metafields bound to an owner resource.
"""

from typing import TYPE_CHECKING

from ..models import Metafield
from ..utils import metafield_path_prefix
from .base import CRUDResource, Resource

if TYPE_CHECKING:
    from ..client import ShopifyAdminClient


class MetafieldResource(CRUDResource):
    """
    Metafields at metafields.json, or {owner}/{id}/metafields.json when
    bound to an owner.
    """
    singular = "metafield"
    plural = "metafields"
    model = Metafield

    def __init__(self, client: "ShopifyAdminClient", owner: str = "", owner_id: int = None):
        super().__init__(client)
        self.owner = owner
        self.owner_id = owner_id

    @property
    def base_path(self) -> str:
        return metafield_path_prefix(self.owner, self.owner_id)


class MetafieldsMixin(Resource):
    """Adds metafields(owner_id) for resources that own metafields"""
    metafield_owner: str = ""

    def metafields(self, resource_id: int) -> MetafieldResource:
        """Metafields owned by the given resource"""
        return MetafieldResource(self.client, self.metafield_owner or self.path, resource_id)
