import json
from typing import Any, Union

from pydantic import TypeAdapter

from ..models.body import ManyBody, RequestBody, SingleBody
from ..models.meta import MetaEntity


class JsonSerializer:
    """Maps entities to and from the JSON the API speaks.

    Field names go over the wire by alias (camelCase) and unset fields are
    left out, so partial entities can be sent on update.
    """

    def serialize(self, body: Union[RequestBody, MetaEntity]) -> str:
        if isinstance(body, MetaEntity):
            body = SingleBody(body)

        if isinstance(body, SingleBody):
            return body.entity.model_dump_json(by_alias=True, exclude_none=True)
        if isinstance(body, ManyBody):
            return json.dumps(
                [self._dump(entity) for entity in body.entities],
                ensure_ascii=False,
            )
        raise TypeError(f"Cannot serialize body of type {type(body).__name__}")

    def deserialize(self, content: Union[str, bytes], target_type: Any) -> Any:
        """Validate ``content`` as ``target_type``.

        ``target_type`` can be a model (``Product``), a collection of models
        (``list[Product]``) or a page (``EntityList[Product]``). Validation
        errors are not wrapped.
        """
        return TypeAdapter(target_type).validate_json(content)

    @staticmethod
    def _dump(entity: MetaEntity) -> dict[str, Any]:
        return entity.model_dump(mode="json", by_alias=True, exclude_none=True)
