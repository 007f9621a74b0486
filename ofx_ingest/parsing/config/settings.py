"""
Loader Settings

Defines the knobs of the OFX loading pipeline and loads overrides from
a JSON configuration file.
"""
import os
import json
import dataclasses
from dataclasses import dataclass, field
from typing import Dict, Optional

from ofx_ingest.common.logging_config import get_logger

logger = get_logger(__name__)

SETTINGS_ENV_VAR = "OFX_INGEST_SETTINGS"


def _default_charset_map() -> Dict[str, str]:
    # Exporters declaring 28591 (ISO-8859-1) actually write UTF-8.
    return {
        '65001': 'utf-8',
        '28591': 'utf-8',
    }


@dataclass(frozen=True)
class LoaderSettings:
    """
    Configuration for the OFX loading pipeline.

    Attributes:
        charset_map: Declared CHARSET code -> Python codec name
        default_encoding: Codec used when the charset is absent or unknown
        root_tag: Marker of the start of the markup body (matched case-insensitively)
        trntype_placeholder: Value written into empty <TRNTYPE> fields
    """
    charset_map: Dict[str, str] = field(default_factory=_default_charset_map)
    default_encoding: str = 'cp1252'
    root_tag: str = '<OFX>'
    trntype_placeholder: str = 'OTHER'


def load_settings(path: Optional[str] = None) -> LoaderSettings:
    """
    Load settings from a JSON file.

    Args:
        path: JSON file with any subset of the LoaderSettings fields.
            Falls back to the OFX_INGEST_SETTINGS environment variable.

    Returns:
        LoaderSettings with the file's values over the defaults.
    """
    path = path or os.getenv(SETTINGS_ENV_VAR)
    if not path:
        return LoaderSettings()

    if not os.path.exists(path):
        logger.warning(f"Settings file not found: {path}", path=path)
        return LoaderSettings()

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Error loading settings {path}: {e}", path=path)
            raise

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    known = {f.name for f in dataclasses.fields(LoaderSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {', '.join(unknown)}")

    if 'charset_map' in data:
        data['charset_map'] = {str(k): v for k, v in data['charset_map'].items()}

    logger.debug(f"Loaded settings: {path}", overrides=sorted(data))
    return LoaderSettings(**data)
