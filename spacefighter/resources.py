"""Loading and caching of game resources from files."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

_ID_LIMIT = 1 << 16


class _Resource(Protocol):
    resource_id: int
    resource_manager: Any

    def load(self, path: str, manager: "ResourceManager") -> bool: ...


T = TypeVar("T")


class ResourceLoadError(Exception):
    """Raised when a resource cannot be loaded."""

    def __init__(self, path: str) -> None:
        super().__init__(f"failed to load resource {path!r}")
        self.path = path


class ResourceManager:
    """Loads resources and keeps them alive until they are unloaded.

    A resource type is a class constructible with no arguments whose
    ``load(path, manager)`` returns True on success. It may offer
    ``is_cloneable()`` and ``clone()`` to hand out copies of a cached
    resource, and ``unload()`` to release what it holds.
    """

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: dict[str, Any] = {}
        self._clones: list[Any] = []
        self._next_id = 0

    def _assign_id(self, resource: Any) -> None:
        resource.resource_id = self._next_id
        self._next_id = (self._next_id + 1) % _ID_LIMIT

    def load(
        self,
        resource_type: type[T],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> T:
        """Return the resource at path, loading and caching it if needed.

        Cached resources that can be cloned are returned as fresh clones.
        Raises ResourceLoadError if loading fails, and TypeError if the
        cached resource is not of the requested type.
        """
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, resource_type):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, "
                    f"not a {resource_type.__name__}"
                )
            is_cloneable = getattr(cached, "is_cloneable", None)
            if is_cloneable is not None and is_cloneable():
                clone = cached.clone()
                self._assign_id(clone)
                self._clones.append(clone)
                return clone
            return cached

        resource = resource_type()
        resource.resource_manager = self
        full_path = self.content_path + path if append_content_path else path
        if not resource.load(full_path, self):
            raise ResourceLoadError(full_path)
        if cache:
            self._resources[path] = resource
        self._assign_id(resource)
        return resource

    def unload_all(self) -> None:
        """Release every cached resource and every clone handed out."""
        for resource in [*self._resources.values(), *self._clones]:
            unload = getattr(resource, "unload", None)
            if unload is not None:
                unload()
        self._resources.clear()
        self._clones.clear()