import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from jarpack.core.exceptions import ConfigError
from ..domain.interfaces import IConfigStore
from ..domain.models import ProjectConfig

logger = logging.getLogger(__name__)

class JsonConfigStore(IConfigStore):

    def load(self, path: Path) -> Optional[ProjectConfig]:
        if not path.exists():
            logger.debug(f"No project config at {path}")
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid {path.name}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {path.name}: expected a JSON object")

        try:
            config = ProjectConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid {path.name}: {e}") from e

        logger.debug(f"Loaded project config from {path}")
        return config

    def save(self, path: Path, config: ProjectConfig) -> None:
        data = config.model_dump(exclude_none=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        logger.debug(f"Saved project config to {path}")
