# core/utils.py
from core.vector import Vector3

# Hit distances are scaled by this factor so the reported point sits just
# in front of the surface it was found on.
EPSILON_BIAS = 1 - 1e-10

# Below this |d.n| a ray is treated as parallel to a plane.
PARALLEL_EPSILON = 1e-12

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
