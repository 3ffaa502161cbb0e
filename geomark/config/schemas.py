from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# Shared literals
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
AestheticName = Literal["minimalist", "tech", "nature", "bold"]


class EngineCfg(BaseModel):
    default_industry: str = "general"
    default_aesthetic: Optional[AestheticName] = None

    model_config = ConfigDict(extra="allow")


class LoggingCfg(BaseModel):
    level: LogLevel = "INFO"
    log_file: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class ExportCfg(BaseModel):
    out_dir: Optional[str] = None
    write_manifest: bool = True
    qa: bool = False

    model_config = ConfigDict(extra="allow")


class GlobalCfg(BaseModel):
    engine: EngineCfg = Field(default_factory=EngineCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)
    export: ExportCfg = Field(default_factory=ExportCfg)

    model_config = ConfigDict(extra="allow")
