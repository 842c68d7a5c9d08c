from typing import TYPE_CHECKING, Generic, List, Optional, Sequence, Type

from .._http import RequestExecutor
from .._utils._params import ExpandParam, Param
from ..models import EntityList
from ..models.entities import EntityT

if TYPE_CHECKING:
    from .._api_client import ApiClient


class EntityService(Generic[EntityT]):
    """CRUD operations over one entity collection, ``/entity/<type>``.

    Every call builds a fresh ``RequestExecutor``; nothing is cached between
    calls.
    """

    def __init__(self, api: "ApiClient", entity_type: str, model: Type[EntityT]) -> None:
        self._api = api
        self._entity_type = entity_type
        self._model = model
        self._base_path = f"/entity/{entity_type}"

    @property
    def entity_type(self) -> str:
        return self._entity_type

    def list(self, params: Optional[Sequence[Param]] = None) -> EntityList[EntityT]:
        """List entities of this type.

        Args:
            params: Typed params (filter, order, limit, ...) narrowing the page.

        Returns:
            EntityList: One page of entities. ``meta.size`` holds the total count.

        Examples:
            ```python
            from moysklad import ApiClient, FilterParam, FilterSign, LimitParam

            api = ApiClient()
            page = api.products.list(
                [FilterParam("archived", FilterSign.EQUALS, False), LimitParam(100)]
            )
            ```
        """
        return (
            RequestExecutor.for_path(self._api, self._base_path)
            .params(params or [])
            .get(EntityList[self._model])  # type: ignore[name-defined]
        )

    def retrieve(
        self, entity_id: str, *, expand: Optional[Sequence[str]] = None
    ) -> EntityT:
        """Retrieve one entity by id.

        Args:
            entity_id: The entity UUID.
            expand: Nested fields to expand in the response, e.g. ``["owner"]``.
        """
        return (
            RequestExecutor.for_path(self._api, f"{self._base_path}/{entity_id}")
            .params([ExpandParam(field) for field in expand or []])
            .get(self._model)
        )

    def refresh(self, entity: EntityT) -> EntityT:
        """Fetch the current state of ``entity`` through its ``meta.href``."""
        if entity.meta is None or not entity.meta.href:
            raise ValueError("Entity has no meta.href to refresh from.")

        return RequestExecutor.for_url(self._api, entity.meta.href).get(self._model)

    def create(self, entity: EntityT) -> EntityT:
        return (
            RequestExecutor.for_path(self._api, self._base_path)
            .body(entity)
            .post(self._model)
        )

    def create_many(self, entities: Sequence[EntityT]) -> List[EntityT]:
        """Create or update several entities in one request.

        Entities carrying ``meta`` are updated, the rest are created.
        """
        return (
            RequestExecutor.for_path(self._api, self._base_path)
            .body_array(entities)
            .post(List[self._model])  # type: ignore[name-defined]
        )

    def update(self, entity_id: str, entity: EntityT) -> EntityT:
        return (
            RequestExecutor.for_path(self._api, f"{self._base_path}/{entity_id}")
            .body(entity)
            .put(self._model)
        )

    def delete(self, entity_id: str) -> None:
        RequestExecutor.for_path(self._api, f"{self._base_path}/{entity_id}").delete()
