from .surface import DrawingSurface
