from __future__ import annotations

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC = ROOT / "python"

if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))
else:
    sys.path.remove(str(PYTHON_SRC))
    sys.path.insert(0, str(PYTHON_SRC))


def _prefer_local_tessera_package() -> None:
    loaded = sys.modules.get("tessera")
    if loaded is None:
        return
    mod_file = getattr(loaded, "__file__", "") or ""
    if str(PYTHON_SRC / "tessera") in mod_file:
        return
    for name in list(sys.modules):
        if name == "tessera" or name.startswith("tessera."):
            sys.modules.pop(name, None)


_prefer_local_tessera_package()
