from decimal import Decimal
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from ..utils.money import to_count, to_non_negative


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def id_text(v: Any) -> Any:
    # Record ids arrive as uuids or integers depending on the store; JSON
    # clients sometimes send 3.0 for 3.
    if isinstance(v, bool):
        return v
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return v


def id_list(v: Any) -> Any:
    if v is None:
        return []
    if isinstance(v, (list, tuple, set, frozenset)):
        return [id_text(i) for i in v if i is not None]
    return v


IdText = Annotated[str, BeforeValidator(id_text)]
IdList = Annotated[List[str], BeforeValidator(id_list)]
# Malformed or negative amounts price as zero rather than rejecting the request
LenientMoney = Annotated[Decimal, BeforeValidator(to_non_negative)]
LenientCount = Annotated[int, BeforeValidator(to_count)]
