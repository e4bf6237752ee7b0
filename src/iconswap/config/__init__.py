from .config import CodemodConfig, load_config

__all__ = ["CodemodConfig", "load_config"]
