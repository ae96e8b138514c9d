from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

from kebab_rename.errors import ConfigError

SEARCH_CANDIDATES = (
    "app/components",
    "components",
    "src/components",
    "src/app/components",
)

SOURCE_EXTENSIONS = (".vue", ".ts")

POLICIES = ("allowlist", "structural")

# Component families shipped by the shadcn-vue registry.
COMPONENT_PREFIXES = (
    "Accordion",
    "Alert",
    "AspectRatio",
    "Avatar",
    "Badge",
    "Breadcrumb",
    "Button",
    "Calendar",
    "Card",
    "Carousel",
    "Chart",
    "Checkbox",
    "Collapsible",
    "Combobox",
    "Command",
    "ContextMenu",
    "DataTable",
    "DatePicker",
    "Dialog",
    "Drawer",
    "DropdownMenu",
    "Form",
    "HoverCard",
    "Input",
    "Label",
    "Menubar",
    "NavigationMenu",
    "NumberField",
    "Pagination",
    "PinInput",
    "Popover",
    "Progress",
    "RadioGroup",
    "RangeCalendar",
    "Resizable",
    "ScrollArea",
    "Select",
    "Separator",
    "Sheet",
    "Sidebar",
    "Skeleton",
    "Slider",
    "Sonner",
    "Stepper",
    "Switch",
    "Table",
    "Tabs",
    "TagsInput",
    "Textarea",
    "Toast",
    "Toggle",
    "ToggleGroup",
    "Tooltip",
)

RESERVED_SUFFIXES = ("Props", "Emits", "Context")

# Primitive helpers re-exported from the headless library and DOM type names.
RESERVED_SUBSTRINGS = (
    "HTML",
    "SVG",
    "Attributes",
    "Element",
    "Event",
    "Provider",
    "Portal",
    "Primitive",
    "Root",
    "Variants",
)


@dataclass(frozen=True)
class RenameConfig:
    extensions: Tuple[str, ...] = SOURCE_EXTENSIONS
    policy: str = "allowlist"
    component_prefixes: Tuple[str, ...] = COMPONENT_PREFIXES
    reserved_suffixes: Tuple[str, ...] = RESERVED_SUFFIXES
    reserved_substrings: Tuple[str, ...] = RESERVED_SUBSTRINGS
    search_candidates: Tuple[str, ...] = SEARCH_CANDIDATES

    def __post_init__(self) -> None:
        if self.policy not in POLICIES:
            raise ConfigError(
                f"Unknown classifier policy {self.policy!r} (expected one of: {', '.join(POLICIES)})"
            )
        for ext in self.extensions:
            if not ext.startswith("."):
                raise ConfigError(f"Extension must start with a dot: {ext!r}")

    def is_eligible(self, path: Path) -> bool:
        return path.suffix in self.extensions


def _coerce_value(key: str, value: Any) -> Any:
    if key == "policy":
        if not isinstance(value, str):
            raise ConfigError(f"Config key 'policy' must be a string, got {type(value).__name__}")
        return value
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"Config key {key!r} must be a list of strings")
    return tuple(value)


def config_from_mapping(data: dict[str, Any], base: Optional[RenameConfig] = None) -> RenameConfig:
    config = base or RenameConfig()
    known = {field.name for field in fields(RenameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
    overrides = {key: _coerce_value(key, value) for key, value in data.items()}
    return replace(config, **overrides)


def load_config(path: Path) -> RenameConfig:
    """Load overrides from a YAML file on top of the defaults.

    Keys match the ``RenameConfig`` field names; lists replace the default
    lists wholesale.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return RenameConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return config_from_mapping(data)


def find_components_dir(cwd: Path, candidates: Tuple[str, ...] = SEARCH_CANDIDATES) -> Path:
    resolved = cwd.expanduser().resolve()
    for rel in candidates:
        candidate = resolved / rel / "ui"
        if candidate.is_dir():
            return candidate
    for rel in candidates:
        candidate = resolved / rel
        if candidate.is_dir():
            return candidate
    raise ConfigError(
        f"Could not find a components directory under {resolved} "
        f"(looked in: {', '.join(candidates)}). Please provide the path as an argument."
    )
