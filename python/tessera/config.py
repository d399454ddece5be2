# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Tessera-Commercial
from pathlib import Path
from typing import Dict, Optional, Any
import tomllib

from .jsx.compiler import MAX_CONCURRENT_ITERABLE_RESOLUTION, CompileOptions
from .jsx.presets import DEFAULT_STYLE_PRESETS, merge_presets
from .render import DEFAULT_RENDER_OPTIONS

CONFIG_FILENAME = "tessera.toml"

# Default configuration structure
DEFAULT_CONFIG = {
    "jsx": {
        "default_styles": True,
        "tailwind_property": "tw",
        "max_concurrency": MAX_CONCURRENT_ITERABLE_RESOLUTION,
        "presets": {
            # "h1": { "fontSize": "3em" }
        },
    },
    "render": {
        # Options forwarded verbatim to the engine, e.g. format = "png"
    },
}

class Config:
    def __init__(self, data: Dict[str, Any], path: Path):
        self.data = data
        self.path = path
        self.root = path.parent

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from tessera.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}.")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e

        return cls(data, path)

    @property
    def jsx(self) -> Dict[str, Any]:
        return {**DEFAULT_CONFIG["jsx"], **self.data.get("jsx", {})}

    @property
    def render(self) -> Dict[str, Any]:
        return {**DEFAULT_CONFIG["render"], **self.data.get("render", {})}

    def compile_options(self) -> CompileOptions:
        """Build compiler options; `[jsx.presets.<tag>]` tables replace single default entries."""
        jsx = self.jsx
        default_styles = jsx["default_styles"]
        if not isinstance(default_styles, bool):
            raise ValueError(f"jsx.default_styles must be true or false in {self.path}")
        overrides = jsx["presets"]
        if not isinstance(overrides, dict):
            raise ValueError(f"jsx.presets must be a table in {self.path}")

        presets: Any = default_styles
        if default_styles and overrides:
            presets = merge_presets(DEFAULT_STYLE_PRESETS, overrides)

        return CompileOptions(
            default_styles=presets,
            tailwind_property=jsx["tailwind_property"],
            max_concurrency=jsx["max_concurrency"],
        )

    def render_options(self) -> Dict[str, Any]:
        """Engine options for `render_element`; `[render]` keys override the defaults."""
        render = self.data.get("render", {})
        if not isinstance(render, dict):
            raise ValueError(f"render must be a table in {self.path}")
        return {**DEFAULT_RENDER_OPTIONS, **render}
