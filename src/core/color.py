# core/color.py
from core.vector import Vector3

# Colors are plain Vector3 values with channels in [0, 1].
WHITE = Vector3(1.0, 1.0, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)
LIGHT_BLUE = Vector3(0.5, 0.7, 1.0)
