from dataclasses import dataclass
from typing import Sequence, Union

from .meta import MetaEntity


@dataclass(frozen=True)
class SingleBody:
    entity: MetaEntity


@dataclass(frozen=True)
class ManyBody:
    entities: Sequence[MetaEntity]


RequestBody = Union[SingleBody, ManyBody]
