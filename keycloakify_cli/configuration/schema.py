"""Pydantic models describing the CLI configuration file."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_DOTTED_MODULE = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class MetaConfig(_StrictModel):
    version: str = "1.0"


class CLIConfig(_StrictModel):
    debug: bool = False


class HandlersConfig(_StrictModel):
    package: str = Field(default="keycloakify_handlers")

    @field_validator("package")
    @classmethod
    def _dotted_module_path(cls, value: str) -> str:
        if not _DOTTED_MODULE.match(value):
            raise ValueError(f"not a dotted module path: {value!r}")
        return value


class FallbackConfig(_StrictModel):
    # Command line used to re-spawn the CLI; None means the running interpreter.
    command: Optional[List[str]] = None

    @field_validator("command")
    @classmethod
    def _non_empty(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None and not value:
            raise ValueError("fallback.command must not be empty")
        return value


class KeycloakifyConfig(_StrictModel):
    meta: MetaConfig = Field(default_factory=MetaConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)
    handlers: HandlersConfig = Field(default_factory=HandlersConfig)
    fallback: FallbackConfig = Field(default_factory=FallbackConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeycloakifyConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
