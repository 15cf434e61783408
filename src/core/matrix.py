# core/matrix.py
import math
import numpy as np
from core.vector import Vector3

class Matrix4:
    """
    A 4x4 affine transform in homogeneous coordinates.

    Composition and inversion go through numpy; the per-ray transforms read
    from a cached tuple of rows since they run once per ray per object.
    """
    __slots__ = ("m", "_rows")

    def __init__(self, values):
        m = np.array(values, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Matrix4 needs a 4x4 array, got shape {m.shape}")
        m.setflags(write=False)
        self.m = m
        self._rows = tuple(tuple(row) for row in m.tolist())

    def __getstate__(self):
        return self._rows

    def __setstate__(self, rows):
        self.__init__(rows)

    @staticmethod
    def identity() -> "Matrix4":
        return Matrix4(np.identity(4))

    @staticmethod
    def translation(x: float, y: float, z: float) -> "Matrix4":
        m = np.identity(4)
        m[0:3, 3] = (x, y, z)
        return Matrix4(m)

    @staticmethod
    def scaling(x: float, y: float, z: float) -> "Matrix4":
        return Matrix4(np.diag((x, y, z, 1.0)))

    @staticmethod
    def rotation(axis: Vector3, degrees: float) -> "Matrix4":
        """
        Rotation of `degrees` around `axis` (Rodrigues' formula).
        """
        a = axis.normalize()
        theta = math.radians(degrees)
        k = np.array([[0.0, -a.z, a.y],
                      [a.z, 0.0, -a.x],
                      [-a.y, a.x, 0.0]])
        aa = np.outer((a.x, a.y, a.z), (a.x, a.y, a.z))
        r = math.cos(theta) * np.identity(3) + (1 - math.cos(theta)) * aa + math.sin(theta) * k
        m = np.identity(4)
        m[0:3, 0:3] = r
        return Matrix4(m)

    def __matmul__(self, other: "Matrix4") -> "Matrix4":
        return Matrix4(self.m @ other.m)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def inverse(self) -> "Matrix4":
        try:
            inv = np.linalg.inv(self.m)
        except np.linalg.LinAlgError as e:
            raise ValueError(f"Transform is not invertible: {e}") from e
        return Matrix4(inv)

    def is_close(self, other: "Matrix4", tol: float = 1e-9) -> bool:
        return bool(np.allclose(self.m, other.m, atol=tol))

    def is_inverse_of(self, other: "Matrix4", tol: float = 1e-9) -> bool:
        """
        True if self @ other is the identity. Each entry of the product is
        allowed an error proportional to the magnitude of the terms summed
        into it, so large translations do not trip the check.
        """
        error = np.abs(self.m @ other.m - np.eye(4))
        bound = tol * (1.0 + np.abs(self.m) @ np.abs(other.m))
        return bool((error <= bound).all())

    def transform_point(self, p: Vector3) -> Vector3:
        """
        Computes M.(p, 1) followed by the homogeneous divide.
        """
        r0, r1, r2, r3 = self._rows
        w = r3[0] * p.x + r3[1] * p.y + r3[2] * p.z + r3[3]
        if w == 0:
            raise ValueError(f"Homogeneous coordinate is zero for point {p}")
        return Vector3((r0[0] * p.x + r0[1] * p.y + r0[2] * p.z + r0[3]) / w,
                       (r1[0] * p.x + r1[1] * p.y + r1[2] * p.z + r1[3]) / w,
                       (r2[0] * p.x + r2[1] * p.y + r2[2] * p.z + r2[3]) / w)

    def transform_direction(self, v: Vector3) -> Vector3:
        r0, r1, r2, _ = self._rows
        return Vector3(r0[0] * v.x + r0[1] * v.y + r0[2] * v.z,
                       r1[0] * v.x + r1[1] * v.y + r1[2] * v.z,
                       r2[0] * v.x + r2[1] * v.y + r2[2] * v.z)

    def transform_normal(self, n: Vector3) -> Vector3:
        """
        Applies the transpose of the upper 3x3 block. Call it on the
        inverse model matrix to map normals; the result is not normalized.
        """
        r0, r1, r2, _ = self._rows
        return Vector3(r0[0] * n.x + r1[0] * n.y + r2[0] * n.z,
                       r0[1] * n.x + r1[1] * n.y + r2[1] * n.z,
                       r0[2] * n.x + r1[2] * n.y + r2[2] * n.z)

    def __repr__(self) -> str:
        return f"Matrix4({[list(row) for row in self._rows]})"

IDENTITY = Matrix4.identity()
