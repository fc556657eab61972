"""Profile loader for ketodot runs."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError
from .graph.coloring import DEFAULT_PALETTE
from .graph.render import check_output

_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class OutputProfile(BaseModel):
    format: str = "dot"
    path: str | None = None


class WatchProfile(BaseModel):
    poll_seconds: float = 0.5

    @field_validator("poll_seconds")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("poll_seconds must be positive")
        return value


class KetodotProfile(BaseModel):
    profile_id: str = "local"
    palette: list[str] = list(DEFAULT_PALETTE)
    output: OutputProfile = OutputProfile()
    watch: WatchProfile = WatchProfile()

    @field_validator("palette")
    @classmethod
    def _distinct_colors(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("palette must hold at least one color")
        if len(set(value)) != len(value):
            raise ValueError("palette colors must be distinct")
        return value

    def with_overrides(
        self,
        *,
        output_format: str | None = None,
        output_path: str | None = None,
        poll_seconds: float | None = None,
    ) -> "KetodotProfile":
        output = self.output.model_copy(
            update={
                key: value
                for key, value in (("format", output_format), ("path", output_path))
                if value is not None
            }
        )
        watch = self.watch
        if poll_seconds is not None:
            try:
                watch = WatchProfile(poll_seconds=poll_seconds)
            except ValidationError as exc:
                raise ConfigError(f"invalid poll interval {poll_seconds!r}") from exc
        return self.model_copy(update={"output": output, "watch": watch})

    def validate_output(self) -> None:
        check_output(self.output.format, self.output.path)


def _expand_str(value: str) -> str:
    def replacer(match: re.Match[str]) -> str:
        token = match.group(1)
        if ":-" in token:
            key, default = token.split(":-", 1)
            actual = os.getenv(key, "")
            return actual if actual.strip() else default
        actual = os.getenv(token, "")
        if not actual.strip():
            raise ConfigError(f"missing environment variable: {token}")
        return actual

    return _VAR_PATTERN.sub(replacer, value)


def _expand_payload(value: Any) -> Any:
    if isinstance(value, str):
        return _expand_str(value)
    if isinstance(value, list):
        return [_expand_payload(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _expand_payload(item) for key, item in value.items()}
    return value


def load_profile(path: Path | None) -> KetodotProfile:
    """Load a YAML profile, or the built-in defaults when ``path`` is None."""
    if path is None:
        return KetodotProfile()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"could not read profile {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"profile {path} is not valid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"profile {path} must be a mapping")
    try:
        return KetodotProfile(**_expand_payload(data))
    except ValidationError as exc:
        raise ConfigError(f"profile {path} is invalid: {exc}") from exc
