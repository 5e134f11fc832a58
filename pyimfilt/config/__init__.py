from .io import load_config

__all__ = ["load_config"]
