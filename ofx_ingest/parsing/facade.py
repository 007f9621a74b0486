import os
from typing import Union

from .config.settings import load_settings
from .sources.ofx import OfxLoader


def get_loader(settings_path: str = None) -> OfxLoader:
    """
    Build an OfxLoader from the settings file, if one is configured.
    """
    return OfxLoader(load_settings(settings_path))


def load_from_path(file_path: Union[str, os.PathLike]):
    """
    Load an OFX file from disk. Returns the root lxml element.
    """
    return get_loader().load_from_path(file_path)


def load_from_text(content: Union[str, bytes]):
    """
    Load OFX content. Returns the root lxml element.
    """
    return get_loader().load_from_text(content)
