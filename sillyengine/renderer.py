"""Renderers that draw game objects into a window."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

from .camera import Camera, FlyControl
from .mesh import ColoredMesh
from .object import GameObject
from .utils import Shared

logger = logging.getLogger(__name__)

WINDOW_TITLE = "game engine window"
MAX_SIZE = (1920, 1080)
_START_SIZE = (1280, 720)


class MissingModelError(Exception):
    """Raised when an object has no model to draw."""


class Renderer(ABC):
    @abstractmethod
    def start_render(self) -> None: ...

    @abstractmethod
    def set_objects(self, objects: Sequence[Shared[GameObject]]) -> None: ...


def object_gm(obj: Shared[GameObject]) -> ColoredMesh:
    """Return the coloured mesh of an object's model."""
    with obj as o:
        model = o.model()
    if model is None:
        raise MissingModelError("missing model")
    with model as m:
        return m.gm()


class PygameRenderer(Renderer):
    """Draws objects as flat-coloured triangles in a pygame window."""

    def __init__(self, objects: Sequence[Shared[GameObject]]) -> None:
        self.objects: list[Shared[GameObject]] = list(objects)
        self.camera = Camera((60.0, 50.0, 60.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0),
                             45.0, 0.1, 1000.0, *_START_SIZE)
        self.control = FlyControl(10.0)

    def set_objects(self, objects: Sequence[Shared[GameObject]]) -> None:
        self.objects = list(objects)

    def step(self, delta: float) -> None:
        """Update every object by delta seconds."""
        for shared in self.objects:
            with shared as obj:
                obj.update(delta)

    def frame_meshes(self) -> list[ColoredMesh]:
        """Return the world-space meshes of all objects that have a model."""
        meshes = []
        for shared in self.objects:
            with shared as obj:
                matrix = obj.transform().matrix()
            try:
                meshes.append(object_gm(shared).transformed(matrix))
            except MissingModelError as e:
                logger.info("skipped model because unable to get Gm %s", e)
        return meshes

    def start_render(self) -> None:
        import pygame

        keymap = {
            pygame.K_w: "forward", pygame.K_s: "back", pygame.K_a: "left",
            pygame.K_d: "right", pygame.K_SPACE: "up", pygame.K_LSHIFT: "down",
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode(_START_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.VIDEORESIZE:
                        size = (min(event.w, MAX_SIZE[0]), min(event.h, MAX_SIZE[1]))
                        screen = pygame.display.set_mode(size, pygame.RESIZABLE)
                self.camera.set_viewport(*screen.get_size())
                delta = clock.tick() / 1000.0
                held = pygame.key.get_pressed()
                self.control.handle_keys(self.camera, {n for k, n in keymap.items() if held[k]}, delta)
                self.step(delta)
                screen.fill((128, 204, 204))
                self._draw(pygame, screen, self.frame_meshes())
                pygame.display.flip()
        finally:
            pygame.quit()

    def _draw(self, pygame, screen, meshes: list[ColoredMesh]) -> None:
        triangles = []
        for cm in meshes:
            projected = self.camera.project(cm.mesh.positions)
            for tri in cm.mesh.indices:
                corners = projected[tri]
                if not np.isnan(corners).any():
                    triangles.append((corners[:, 2].mean(), corners[:, :2], cm.color[:3]))
        triangles.sort(key=lambda t: t[0], reverse=True)
        for _, xy, color in triangles:
            pygame.draw.polygon(screen, color, [tuple(p) for p in xy])
        origin, *ends = self.camera.project(np.vstack([np.zeros(3), np.identity(3) * 10.0]))
        if np.isnan(origin).any():
            return
        for end, color in zip(ends, ((255, 0, 0), (0, 255, 0), (0, 0, 255))):
            if not np.isnan(end).any():
                pygame.draw.line(screen, color, tuple(origin[:2]), tuple(end[:2]), 3)


class EngineRenderer:
    """Keeps the scene's objects and hands them to the window renderer."""

    def __init__(self, objects: Sequence[Shared[GameObject]]) -> None:
        self.objects: list[Shared[GameObject]] = list(objects)
        self.renderer = PygameRenderer(objects)

    def set_objects(self, objects: Sequence[Shared[GameObject]]) -> None:
        self.objects = list(objects)
        self.renderer.set_objects(objects)

    def start_render(self) -> None:
        self.renderer.start_render()