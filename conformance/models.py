# conformance/models.py

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class InstallOptions(BaseModel):
    """Options handed to `ConformanceTask.install` by the runner."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    runner: Any = None
    attach_logger: bool | None = None

    @classmethod
    def parse(cls, options: "InstallOptions | Mapping[str, Any] | None") -> "InstallOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))
