from __future__ import annotations

"""Preflight checks for a target path.

CONTRACT
- Inputs: Target file path
- Outputs (required):
  - DoctorReport (ok=bool, items=[(name, status, details)])
- Invariants:
  - Checks: parent directory, directory access, target file, readability
  - Does not modify system state (read-only checks)
- Failure:
  - Returns DoctorReport with ok=False if the file can be neither opened nor created
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DoctorItem:
    name: str
    status: str
    details: str


@dataclass(frozen=True)
class DoctorReport:
    ok: bool
    items: list[DoctorItem]


def doctor_report(path: Path) -> DoctorReport:
    items: list[DoctorItem] = []
    ok = True
    parent = path.parent

    # 1. Critical: parent directory
    if parent.is_dir():
        items.append(DoctorItem("parent dir", "OK", str(parent)))
    else:
        items.append(DoctorItem("parent dir", "FAIL", f"Not a directory: {parent}"))
        return DoctorReport(ok=False, items=items)

    can_create = os.access(parent, os.W_OK | os.X_OK)
    if can_create:
        items.append(DoctorItem("dir writable", "OK", "create-on-missing possible"))
    else:
        items.append(DoctorItem("dir writable", "WARN", "create-on-missing will fail"))

    # 2. Target file
    if path.is_dir():
        ok = False
        items.append(DoctorItem("target", "FAIL", "Path is a directory"))
    elif path.exists():
        items.append(DoctorItem("target", "OK", f"{path.stat().st_size} bytes"))
        if os.access(path, os.R_OK):
            items.append(DoctorItem("readable", "OK", "open for reading possible"))
        else:
            ok = False
            items.append(DoctorItem("readable", "FAIL", "permission denied"))
        if not os.access(path, os.W_OK):
            items.append(DoctorItem("writable", "WARN", "open with --create needs write access"))
    else:
        status = "INFO" if can_create else "FAIL"
        ok = ok and can_create
        items.append(DoctorItem("target", status, "Missing (will be created with --create)"))

    return DoctorReport(ok=ok, items=items)
