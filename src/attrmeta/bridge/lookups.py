from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from beartype import beartype

from attrmeta.attributes.annotation import Annotation
from attrmeta.reflection.members import MemberInfo
from attrmeta.utils.errors import InputValidationError, OperationNotFoundError

_logger = logging.getLogger(__name__)


@beartype
@dataclass(frozen=True)
class LookupRequest:
    """One validated bridge call.

    Attributes:
        operation (str): Registered lookup name.
        target (type | None): Imported class the lookup inspects.
        member (str | None): Member name for member-level lookups.
        include_missing (bool): Whether member listings keep members without
            an annotation.
    """

    operation: str
    target: type | None = None
    member: str | None = None
    include_missing: bool = False


LookupHandler = Callable[[LookupRequest], Mapping[str, Any]]


@dataclass(frozen=True)
class RegisteredLookup:
    """Handler plus the parameters its payload must carry.

    Attributes:
        name (str): Lookup key used for dispatch.
        handler (LookupHandler): Callable answering the request.
        description (str): Catalog text.
        needs_target (bool): Whether ``params.target`` is required.
    """

    name: str
    handler: LookupHandler
    description: str
    needs_target: bool = True


class LookupCatalog:
    """Named annotation lookups reachable from JSON payloads.

    The catalog turns a raw ``{"operation": ..., "params": {...}}`` payload
    into a :class:`LookupRequest`, runs the handler and converts the
    annotations, members and classes it returns into JSON values.
    """

    def __init__(self) -> None:
        self._lookups: dict[str, RegisteredLookup] = {}

    def lookup(
        self,
        name: str,
        *,
        description: str,
        needs_target: bool = True,
    ) -> Callable[[LookupHandler], LookupHandler]:
        """Register the decorated function under ``name``."""

        key = name.strip()
        if not key:
            raise ValueError("Lookup name cannot be empty.")

        def decorator(handler: LookupHandler) -> LookupHandler:
            if key in self._lookups:
                raise ValueError(f"Lookup already registered: {key}")
            self._lookups[key] = RegisteredLookup(
                name=key,
                handler=handler,
                description=description.strip(),
                needs_target=needs_target,
            )
            return handler

        return decorator

    def names(self) -> list[str]:
        return sorted(self._lookups)

    def entries(self) -> list[dict[str, Any]]:
        """Return catalog rows in name order."""

        return [
            {
                "name": name,
                "description": self._lookups[name].description,
                "needs_target": self._lookups[name].needs_target,
            }
            for name in self.names()
        ]

    def parse(self, payload: Mapping[str, Any]) -> LookupRequest:
        """Validate a raw payload against the lookup it names.

        Args:
            payload (Mapping[str, Any]): Decoded JSON object.

        Returns:
            LookupRequest: Request with its target class imported.

        Raises:
            InputValidationError: On a malformed payload or target.
            OperationNotFoundError: When the operation is not registered.
        """

        operation = payload.get("operation")
        if not isinstance(operation, str) or not operation.strip():
            raise InputValidationError("`operation` must be a non-empty string.")
        params = payload.get("params", {})
        if not isinstance(params, Mapping):
            raise InputValidationError("`params` must be an object.")

        registered = self._lookups.get(operation.strip())
        if registered is None:
            raise OperationNotFoundError(f"Unknown operation: {operation}")

        member = params.get("member")
        if member is not None and not isinstance(member, str):
            raise InputValidationError("`member` must be a string.")
        include_missing = params.get("include_missing", False)
        if not isinstance(include_missing, bool):
            raise InputValidationError("`include_missing` must be a boolean.")

        return LookupRequest(
            operation=registered.name,
            target=import_target(params.get("target")) if registered.needs_target else None,
            member=member,
            include_missing=include_missing,
        )

    def answer(self, request: LookupRequest) -> dict[str, Any]:
        """Run the request's handler and return a JSON-ready result."""

        registered = self._lookups.get(request.operation)
        if registered is None:
            raise OperationNotFoundError(f"Unknown operation: {request.operation}")
        return to_json(registered.handler(request))


@beartype
def import_target(raw: Any) -> type:
    """Import the class named ``package.module:QualName``.

    Args:
        raw (Any): Value of ``params.target``.

    Returns:
        type: The class the path points at.

    Raises:
        InputValidationError: When the path is malformed, cannot be imported
            or does not name a class.
    """

    if not isinstance(raw, str) or ":" not in raw:
        raise InputValidationError(
            "`target` must be a string of the form `package.module:ClassName`."
        )
    module_name, _, qualname = raw.strip().partition(":")
    if not module_name or not qualname:
        raise InputValidationError(f"Invalid target: {raw!r}")

    try:
        found: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise InputValidationError(f"Cannot import module `{module_name}`: {exc}") from exc
    for part in qualname.split("."):
        try:
            found = getattr(found, part)
        except AttributeError as exc:
            raise InputValidationError(
                f"`{module_name}` has no attribute path `{qualname}`."
            ) from exc
    if not isinstance(found, type):
        raise InputValidationError(f"Target `{raw}` is not a class.")
    _logger.debug("Resolved bridge target %s", raw)
    return found


def to_json(value: Any) -> Any:
    """Convert lookup results into JSON values.

    Annotations become their field mapping, with a non-primitive ``utilize``
    rendered through ``str``. Members become catalog rows carrying their own
    annotation, and classes become ``module:QualName`` paths.
    """

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Annotation):
        payload = value.to_dict()
        payload["utilize"] = _json_scalar(payload["utilize"])
        return payload
    if isinstance(value, MemberInfo):
        return {
            "name": value.name,
            "kind": value.kind.value,
            "static": value.is_static,
            "public": value.is_public,
            "annotation": to_json(value.get_attribute(Annotation)),
        }
    if isinstance(value, type):
        return f"{value.__module__}:{value.__qualname__}"
    if isinstance(value, Mapping):
        return {str(key): to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    return str(value)


def _json_scalar(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
