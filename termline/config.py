"""Configuration loading and validation using Pydantic."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from termline.domain import (
    DEFAULT_CONTROL_CHARS,
    Attributes,
    ControlChar,
    FilePermission,
    InputFlag,
    LocalFlag,
    OutputFlag,
    SearchMatch,
    TerminalDimensions,
)
from termline.domain.values.terminal_dimensions import DEFAULT_COLS, DEFAULT_ROWS
from termline.infrastructure.channels import PIPE_SIZE

DEFAULT_HISTORY_FILE = "~/.termline_history"


def _check_names(names: list[str], enum_type: type) -> list[str]:
    known = {member.value for member in enum_type}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise ValueError(f"Unknown {enum_type.__name__}: {', '.join(unknown)}")
    return names


class PermissionConfig(BaseModel):
    """History file permission configuration."""

    readable: bool = True
    readable_owner_only: bool = True
    writable: bool = True
    writable_owner_only: bool = True
    executable: bool = False
    executable_owner_only: bool = True


class HistoryConfig(BaseModel):
    """History configuration."""

    enabled: bool = True
    file: str | None = DEFAULT_HISTORY_FILE
    max_size: int = Field(default=500, ge=1)
    search_match: SearchMatch = SearchMatch.CONTAINS
    permission: PermissionConfig = Field(default_factory=PermissionConfig)

    def to_permission(self) -> FilePermission:
        return FilePermission(**self.permission.model_dump())


class AttributesConfig(BaseModel):
    """Line discipline attributes, in cooked mode by default."""

    input_flags: list[str] = Field(default_factory=lambda: [InputFlag.ICRNL.value])
    output_flags: list[str] = Field(
        default_factory=lambda: [OutputFlag.OPOST.value, OutputFlag.ONLCR.value]
    )
    local_flags: list[str] = Field(default_factory=lambda: [LocalFlag.ECHO.value, LocalFlag.ISIG.value])
    control_chars: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_CONTROL_CHARS))

    @field_validator("input_flags")
    @classmethod
    def validate_input_flags(cls, v: list[str]) -> list[str]:
        return _check_names(v, InputFlag)

    @field_validator("output_flags")
    @classmethod
    def validate_output_flags(cls, v: list[str]) -> list[str]:
        return _check_names(v, OutputFlag)

    @field_validator("local_flags")
    @classmethod
    def validate_local_flags(cls, v: list[str]) -> list[str]:
        return _check_names(v, LocalFlag)

    @field_validator("control_chars")
    @classmethod
    def validate_control_chars(cls, v: dict[str, int]) -> dict[str, int]:
        _check_names(list(v), ControlChar)
        for name, value in v.items():
            if not 0 <= value <= 0xFF:
                raise ValueError(f"Control char {name} must be between 0 and 255, got {value}")
        return v

    def to_attributes(self) -> Attributes:
        return Attributes(
            input_flags={InputFlag(name) for name in self.input_flags},
            output_flags={OutputFlag(name) for name in self.output_flags},
            local_flags={LocalFlag(name) for name in self.local_flags},
            control_chars={ControlChar(name): value for name, value in self.control_chars.items()},
        )


class TerminalConfig(BaseModel):
    """Terminal configuration."""

    cols: int = Field(default=DEFAULT_COLS, ge=1)
    rows: int = Field(default=DEFAULT_ROWS, ge=1)
    channel_capacity: int = Field(default=PIPE_SIZE, ge=1)
    attributes: AttributesConfig = Field(default_factory=AttributesConfig)

    def to_dimensions(self) -> TerminalDimensions:
        return TerminalDimensions(cols=self.cols, rows=self.rows)


class Config(BaseModel):
    """Application configuration."""

    history: HistoryConfig = Field(default_factory=HistoryConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)

    def to_attributes(self) -> Attributes:
        return self.terminal.attributes.to_attributes()


def load_config(config_path: Path | str = "termline.yaml") -> Config:
    """Load configuration from YAML file.

    A missing file yields the defaults.

    Raises:
        pydantic.ValidationError: The file content is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        data = {}
    else:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    return Config.model_validate(data)
