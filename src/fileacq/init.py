from __future__ import annotations

"""Template initializer.

CONTRACT
- Inputs: Target directory
- Outputs (required):
  - Writes <dir>/fileacq.yaml
- Invariants:
  - Creates the directory if missing
  - Does not overwrite an existing file (by default)
- Failure:
  - Raises OSError on permission issues
"""

from pathlib import Path

from .config import CONFIG_FILENAME
from .util.paths import copy_template, ensure_dir


def write_templates(target: Path, force: bool = False) -> Path | None:
    ensure_dir(target)
    dest = target / CONFIG_FILENAME
    if copy_template(CONFIG_FILENAME, dest, overwrite=force):
        return dest
    return None
