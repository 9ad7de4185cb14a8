from .loader import load_config
from .models import (
    AgentConfig,
    ModelsConfig,
    NamingConfig,
    OutputConfig,
    RefsConfig,
    SourceConfig,
    TranslateConfig,
)

__all__ = [
    "AgentConfig",
    "ModelsConfig",
    "NamingConfig",
    "OutputConfig",
    "RefsConfig",
    "SourceConfig",
    "TranslateConfig",
    "load_config",
]
