from .loaders import load_amplifier_strategy, load_catalog, load_system_config

__all__ = ["load_amplifier_strategy", "load_catalog", "load_system_config"]
