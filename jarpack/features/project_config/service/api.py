from pathlib import Path
from typing import Optional, Union

from jarpack.core.config.settings import settings
from ..domain.models import ProjectConfig
from ..data.json_store import JsonConfigStore

_store = JsonConfigStore()

def _resolve(path: Union[str, Path, None]) -> Path:
    return Path(path) if path is not None else settings.config_path

def load_project_config(path: Union[str, Path] = None) -> Optional[ProjectConfig]:
    """
    Public Service API: read jarpack.json (default: in the working directory).
    Returns None if there is no such file.
    """
    return _store.load(_resolve(path))

def save_project_config(config: ProjectConfig, path: Union[str, Path] = None) -> None:
    _store.save(_resolve(path), config)
