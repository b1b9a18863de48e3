from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from shopvoice.voice import CONFIG_PATH, PROJECT_ROOT

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHOPVOICE_CONFIG"


# =============================================================================
# VoiceConfig (args/voice.yaml)
# =============================================================================

class PipelineConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    default_language: str = Field(default="en")
    record_history: bool = Field(default=True)


class HistoryConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    db_path: str = Field(default="data/voice.db")
    limit: int = Field(default=50, ge=1)

    def resolved_path(self) -> Path:
        path = Path(self.db_path).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


class ClassifierConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    min_score: float = Field(default=0.5, ge=0.0, le=1.0)
    base_confidence: float = Field(default=0.6, ge=0.0, le=1.0)
    fallback_language: str = Field(default="en")


class VoiceConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)


def load_config(path: Optional[Path | str] = None) -> VoiceConfig:
    """Load and validate voice settings.

    Looks at ``path``, then $SHOPVOICE_CONFIG, then args/voice.yaml. A missing
    file gives the defaults; invalid values raise pydantic.ValidationError.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or CONFIG_PATH
    path = Path(path)

    if not path.exists():
        logger.debug(f"No voice config at {path}, using defaults")
        return VoiceConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return VoiceConfig.model_validate(data)


__all__ = [
    "ClassifierConfig",
    "HistoryConfig",
    "PipelineConfig",
    "VoiceConfig",
    "load_config",
]
