from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class RequestContext:
    """
    Read-only view of the incoming request, built by the host per request.

    - resource: resource identity (e.g. "posts")
    - principal_id: authenticated actor, None when anonymous
    - create_like: True for create / attach / action-invocation forms
    - action: action identity when the fields belong to an action panel

    The action identity is always passed in explicitly; it is never recovered
    from the call stack.

    Compares by value; unhashable because meta is a dict.
    """

    resource: str
    principal_id: Optional[str] = None
    create_like: bool = False
    action: Optional[str] = None

    # Host-specific extras handed to producers/callbacks (never read by the core)
    meta: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.resource, str) or not self.resource.strip():
            raise ValueError("RequestContext.resource must be a non-empty string")
        if self.principal_id is not None:
            object.__setattr__(self, "principal_id", str(self.principal_id))
        object.__setattr__(self, "meta", dict(self.meta) if self.meta else {})

    @classmethod
    def create(cls, resource: str, principal_id: Optional[str] = None, **kwargs: Any) -> "RequestContext":
        return cls(resource=resource, principal_id=principal_id, create_like=True, **kwargs)

    @classmethod
    def update(cls, resource: str, principal_id: Optional[str] = None, **kwargs: Any) -> "RequestContext":
        return cls(resource=resource, principal_id=principal_id, create_like=False, **kwargs)

    def for_action(self, action: str) -> "RequestContext":
        return replace(self, action=action, create_like=True)
