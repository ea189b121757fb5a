"""Request contract - options passed in by callers and the descriptor handed to a transport."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

@dataclass
#a dataclass so callers name only the options they need: CallOptions("PROJ", expand=["lead"])
class CallOptions:
    """
    Options accepted by the project operations.

    Args:
        project_id_or_key: The project id (e.g. '10000') or key (e.g. 'PROJ')
        fields: Fields to include in the response. Sent as one comma-joined querystring value
        expand: Entities to expand in the response. Sent as one comma-joined querystring value
    """

    project_id_or_key: str
    fields: Sequence[str] | None = None
    expand: Sequence[str] | None = None

@dataclass(frozen=True)
class RequestDescriptor:
    """Everything a transport needs to perform one call.

    Built fresh for every call and never retained. The mappings are wrapped in
    read-only proxies so the descriptor cannot be altered after it is returned.
    """

    uri: str
    method: HttpMethod
    body: Mapping[str, Any] = field(default_factory=dict)
    querystring: Mapping[str, str] = field(default_factory=dict)
    follow_redirects: bool = True
    expect_json: bool = True

    def __post_init__(self) -> None:
        #frozen dataclass, so object.__setattr__ is the only way in
        object.__setattr__(self, "method", HttpMethod(self.method))
        object.__setattr__(self, "body", MappingProxyType(dict(self.body)))
        object.__setattr__(self, "querystring", MappingProxyType(dict(self.querystring)))
