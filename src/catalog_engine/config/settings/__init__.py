"""Config settings – 12-factor env-based configuration."""
from catalog_engine.config.settings.base import CatalogSettings, Settings
from catalog_engine.config.settings.factory import SettingsFactory
from catalog_engine.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "CatalogSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
