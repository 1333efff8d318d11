from typing import Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_VERSION = "0.0.0"

class ProjectConfig(BaseModel):
    """
    Schema of jarpack.json.

    Unknown keys are kept so that saving the file back (e.g. after a
    version bump) does not drop anything the user wrote.
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
    )

    name: Optional[str] = None
    namespace: Optional[str] = None
    version: Optional[str] = None
    repository: Optional[str] = None

    @property
    def current_version(self) -> str:
        return self.version or DEFAULT_VERSION
