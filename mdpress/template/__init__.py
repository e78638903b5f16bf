from .manager import TemplateManager, DEFAULT_PLACEHOLDER

__all__ = ["TemplateManager", "DEFAULT_PLACEHOLDER"]
