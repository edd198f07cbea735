"""Real-time mesh viewer: vector and quaternion maths, OBJ loading, primitives, ray picking and an OpenGL scene."""

__version__ = "0.1.0"