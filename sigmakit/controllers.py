"""Controller base class and the camera controller."""

from __future__ import annotations

import abc
import warnings
from typing import Any, ClassVar, Optional


class ControllerComponent(abc.ABC):
    """Base for components that drive a character, player or AI."""

    def __init__(self, character: Any) -> None:
        self.character = character
        self.position: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @abc.abstractmethod
    def update(self) -> None:
        """Advance the controller by one step."""


class CameraController:
    """Tracks which camera is active; the most recently created one is global."""

    _instance: ClassVar[Optional["CameraController"]] = None

    def __init__(self, id: Any) -> None:
        self.id = id
        self.started = False
        self._current_camera: Any = None
        CameraController._instance = self

    @staticmethod
    def instance() -> "CameraController":
        """Return the most recently created controller."""
        if CameraController._instance is None:
            raise RuntimeError("camera controller has not been created yet")
        return CameraController._instance

    def current_camera(self) -> Any:
        """Return the camera in use."""
        if self._current_camera is None:
            raise RuntimeError("no camera currently in use")
        return self._current_camera

    def set_current_camera(self, camera: Any) -> None:
        """Deactivate the previous camera and activate ``camera``."""
        if self._current_camera is not None:
            self._current_camera.active = False
        camera.active = True
        self._current_camera = camera

    def start(self) -> None:
        """Mark the controller started, warning if no camera has been set."""
        self.started = True
        if self._current_camera is None:
            warnings.warn(
                "no camera set on the camera controller before start",
                RuntimeWarning,
                stacklevel=2,
            )