"""Config settings – 12-factor env-based configuration."""
from fluenthook.config.settings.base import Settings
from fluenthook.config.settings.factory import SettingsFactory
from fluenthook.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
