from scenes.builtin import SCENES, Scene, View, build_scene

__all__ = ["SCENES", "Scene", "View", "build_scene"]
