from __future__ import annotations

"""Report schemas.

CONTRACT
- Inputs: Pydantic models
- Outputs:
  - JSON-serializable reports for `fileacq acquire/read --json`
- Invariants:
  - All schemas have schema_version int field
  - ok=False reports always carry kind and message
- Failure:
  - Raises ValidationError on schema mismatch
"""

from pydantic import BaseModel

from .errors import FailureKind, FileAcqError


class AcquireReport(BaseModel):
    schema_version: int = 1
    path: str
    ok: bool
    created: bool = False
    kind: FailureKind | None = None
    operation: str | None = None
    message: str = ""


class ReadReport(BaseModel):
    schema_version: int = 1
    path: str
    ok: bool
    size_bytes: int | None = None
    content: str | None = None
    kind: FailureKind | None = None
    operation: str | None = None
    message: str = ""


def failure_fields(err: FileAcqError) -> dict:
    return {
        "ok": False,
        "kind": getattr(err, "kind", FailureKind.OTHER),
        "operation": getattr(err, "operation", None),
        "message": str(err),
    }
