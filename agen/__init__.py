from .actions import Action, DetectionError, MARKERS, detect_actions

__all__ = ["Action", "DetectionError", "MARKERS", "detect_actions"]
