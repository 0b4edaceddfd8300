"""Configuration for the enum helper."""
import os
import re
from typing import Optional
from pydantic import BaseModel, Field, field_validator

_XML_NAME = re.compile(r"[^\W\d][\w.-]*")


class EnumHelperConfig(BaseModel):
    """Defaults used by the enum helper serializers and logging."""

    # Logging
    service_name: str = Field("enum-helper", description="Service name for logging")
    log_level: str = Field("INFO", description="Logging level")

    # JSON settings
    json_ensure_ascii: bool = Field(True, description="Escape non-ASCII characters in JSON output")
    json_depth: int = Field(512, description="Maximum nesting depth accepted by the JSON encoder")
    json_indent: Optional[int] = Field(None, description="Indentation for JSON output")

    # XML settings
    xml_root: str = Field("enum", description="Root element name for XML output")
    xml_encoding: str = Field("unicode", description="Encoding passed to ElementTree.tostring")

    @field_validator("xml_root")
    @classmethod
    def validate_xml_root(cls, v):
        if not _XML_NAME.fullmatch(v):
            raise ValueError(f"XML root must be a valid element name, got {v!r}")
        return v

    @classmethod
    def from_env(cls) -> "EnumHelperConfig":
        """Create config from environment variables."""
        indent = os.environ.get("ENUM_HELPER_JSON_INDENT")
        return cls(
            log_level=os.environ.get("ENUM_HELPER_LOG_LEVEL", "INFO"),
            json_ensure_ascii=os.environ.get("ENUM_HELPER_JSON_ENSURE_ASCII", "true").lower() == "true",
            json_depth=int(os.environ.get("ENUM_HELPER_JSON_DEPTH", "512")),
            json_indent=int(indent) if indent else None,
            xml_root=os.environ.get("ENUM_HELPER_XML_ROOT", "enum"),
            xml_encoding=os.environ.get("ENUM_HELPER_XML_ENCODING", "unicode"),
        )


_config: Optional[EnumHelperConfig] = None


def get_config() -> EnumHelperConfig:
    """Get the active configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = EnumHelperConfig.from_env()
    return _config


def set_config(config: Optional[EnumHelperConfig]) -> None:
    """Replace the active configuration. Passing None reloads from the environment on next use."""
    global _config
    _config = config
