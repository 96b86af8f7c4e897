from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from typing import Any

from attrmeta.utils.errors import AttrMetaError, InputValidationError

from .operations import CATALOG

_logger = logging.getLogger(__name__)

BRIDGE_NAME = "attrmeta-bridge"
_PING_ARGUMENTS = frozenset({"--ping", "ping", "--health"})

EXIT_OK = 0
EXIT_INTERNAL = 1
EXIT_PAYLOAD = 2
EXIT_LIBRARY = 3


def _write(body: Mapping[str, Any]) -> None:
    print(json.dumps(body, ensure_ascii=False), file=sys.stdout)


def _error(code: int, error_type: str, message: str) -> int:
    _write({"ok": False, "error": {"type": error_type, "message": message}})
    return code


def _decode(raw: str) -> Mapping[str, Any]:
    text = raw.strip()
    if not text:
        raise InputValidationError("Missing JSON input payload on stdin.")
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise InputValidationError("JSON payload must be an object.")
    return payload


def main(argv: list[str] | None = None) -> int:
    """Answer one annotation lookup read from stdin as JSON.

    ``--ping`` reports the bridge name and its registered lookups without
    reading stdin. Payload and target problems exit with 2, unknown lookups
    with 3 and unexpected failures with 1.
    """

    args = list(sys.argv if argv is None else argv)
    if len(args) > 1 and args[1].strip().lower() in _PING_ARGUMENTS:
        _write(
            {
                "ok": True,
                "result": {
                    "bridge": BRIDGE_NAME,
                    "status": "ok",
                    "operations": CATALOG.names(),
                },
            }
        )
        return EXIT_OK

    try:
        request = CATALOG.parse(_decode(sys.stdin.read()))
    except json.JSONDecodeError as exc:
        return _error(EXIT_PAYLOAD, "json_decode_error", str(exc))
    except InputValidationError as exc:
        return _error(EXIT_PAYLOAD, "payload_error", str(exc))
    except AttrMetaError as exc:
        return _error(EXIT_LIBRARY, "library_error", str(exc))

    try:
        result = CATALOG.answer(request)
    except AttrMetaError as exc:
        return _error(EXIT_LIBRARY, "library_error", str(exc))
    except Exception as exc:  # pragma: no cover - reported to the bridge caller
        _logger.exception("Bridge lookup %s failed", request.operation)
        return _error(EXIT_INTERNAL, "internal_error", str(exc))

    _write({"ok": True, "result": result})
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
