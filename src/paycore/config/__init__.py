from paycore.config.config import AppConfig, PaymentsConfig, config

__all__ = [
    "AppConfig",
    "PaymentsConfig",
    "config",
]
