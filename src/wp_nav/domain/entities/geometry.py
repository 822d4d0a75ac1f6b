# wp_nav/domain/entities/geometry.py
import math
from dataclasses import dataclass


# World-space coordinates; only used as heuristic/distance input
@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def sq_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.sq_magnitude())

    def flat(self, y: float) -> "Vec3":
        """Same point projected onto the horizontal plane at height y."""
        return Vec3(self.x, y, self.z)


Pt = Vec3 | tuple[float, float, float]


def to_vec3(p: Pt) -> Vec3:
    return p if isinstance(p, Vec3) else Vec3(float(p[0]), float(p[1]), float(p[2]))


def sq_distance(a: Vec3, b: Vec3) -> float:
    return (a - b).sq_magnitude()


def distance(a: Vec3, b: Vec3) -> float:
    return math.sqrt(sq_distance(a, b))
