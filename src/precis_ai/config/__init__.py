from .loader import load_settings
from .schema import ExtractionConfig, LoggingConfig, ModelConfig, Settings

__all__ = ["ExtractionConfig", "LoggingConfig", "ModelConfig", "Settings", "load_settings"]
