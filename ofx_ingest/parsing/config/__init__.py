# Configuration module
from .settings import LoaderSettings, load_settings

__all__ = ['LoaderSettings', 'load_settings']
