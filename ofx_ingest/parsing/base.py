"""
Base Classes for Parsing Module

Provides the loader template shared by the file-based and text-based
entry points.
"""
import os
from abc import ABC, abstractmethod
from typing import Union

from ofx_ingest.common.logging_config import get_logger
from .exceptions import DocumentNotFoundError

logger = get_logger(__name__)


class BaseLoader(ABC):
    """
    Abstract Base Class for document loaders.

    Subclasses implement ``load_from_text``; reading the file is done
    here once for all of them.
    """

    def load_from_path(self, file_path: Union[str, os.PathLike]):
        """
        Load a document by way of a filename.

        Raises:
            DocumentNotFoundError: if the file does not exist
        """
        if not os.path.isfile(file_path):
            logger.warning("File not found", file_path=str(file_path))
            raise DocumentNotFoundError(file_path)

        try:
            with open(file_path, 'rb') as f:
                raw = f.read()
        except FileNotFoundError:
            logger.warning("File disappeared before reading", file_path=str(file_path))
            raise DocumentNotFoundError(file_path)

        logger.debug("File read", file_path=str(file_path), size=len(raw))
        return self.load_from_text(raw)

    @abstractmethod
    def load_from_text(self, content: Union[str, bytes]):
        """
        Load a document directly from its content.
        Must be implemented by subclasses.
        """
        raise NotImplementedError
