"""Centralised configuration objects for door tree workflows."""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union, get_args, get_origin


def _coerce_value(value: str, target_type: Any) -> Any:
    """Best-effort coercion used by environment overrides."""

    if isinstance(target_type, str):  # postponed annotations
        target_type = {
            "bool": bool,
            "int": int,
            "float": float,
            "str": str,
            "str | None": Optional[str],
            "Optional[str]": Optional[str],
        }.get(target_type, str)
    if get_origin(target_type) is Union:
        if value.lower() in {"", "none", "null"}:
            return None
        target_type = next(arg for arg in get_args(target_type) if arg is not type(None))
    if get_origin(target_type) in {list, List}:  # comma-separated parsing for lists
        return [item.strip() for item in value.split(",") if item.strip()]
    if target_type is bool:
        return value.lower() in {"1", "true", "yes", "on"}
    if target_type is int:
        return int(value)
    if target_type is float:
        return float(value)
    return value


@dataclass
class Config:
    """Settings for a single door tree solve."""

    input_path: Optional[str] = None
    root_id: int = 1
    algorithm: str = "need_propagation"
    output_dir: str = "artifacts"
    write_summary: bool = False
    summary_filename: str = "run.json"
    render: bool = False
    render_filename: str = "tree.png"
    render_dpi: int = 120
    verbose: bool = False
    run_name: Optional[str] = None

    def ensure_output_dir(self) -> Path:
        directory = Path(self.output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def output_path(self, filename: str) -> Path:
        return self.ensure_output_dir() / filename

    def label(self) -> str:
        if self.run_name:
            return self.run_name
        if self.input_path:
            return Path(self.input_path).stem
        return "stdin"

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_env(self, prefix: str = "DOOR_TREE_") -> "Config":
        for field in fields(self):
            env_key = f"{prefix}{field.name.upper()}"
            if env_key in os.environ:
                raw_value = os.environ[env_key]
                try:
                    coerced = _coerce_value(raw_value, field.type)
                except ValueError as exc:
                    raise ValueError(f"Failed to parse env var {env_key}: {raw_value}") from exc
                setattr(self, field.name, coerced)
        return self


@dataclass
class BatchSettings:
    """Directory of puzzle files to solve in one go."""

    input_dir: str = "puzzles"
    pattern: str = "*.txt"
    output_root: str = "batch_runs"
    algorithm: str = "need_propagation"
    root_id: int = 1
    render: bool = False

    def iter_configs(self) -> Iterable[Config]:
        for path in sorted(Path(self.input_dir).glob(self.pattern)):
            label = path.stem
            yield Config(
                input_path=str(path),
                root_id=self.root_id,
                algorithm=self.algorithm,
                output_dir=str(Path(self.output_root) / label),
                render=self.render,
                run_name=label,
            )


__all__ = ["Config", "BatchSettings"]
