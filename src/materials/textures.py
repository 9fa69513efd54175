# materials/textures.py
import math
import numpy as np
from core.uv import UV
from core.vector import Color, Point3, Vector3


class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, p: Point3) -> Color:
        """Color of the texture at surface coordinates uv and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, uv: UV, p: Point3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern alternating between two sub-textures, decided by
    the sign of sin(sx)·sin(sy)·sin(sz) at the hit point.
    """
    def __init__(self, odd: Texture, even: Texture, scale: float = 10.0):
        self.odd = odd
        self.even = even
        self.scale = scale

    def value(self, uv: UV, p: Point3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(uv, p)
        return self.even.value(uv, p)


class Perlin:
    """Gradient noise over a 256-entry lattice of random unit vectors."""
    POINT_COUNT = 256

    def __init__(self, rng: np.random.Generator = None):
        # Falls back to the global numpy stream so np.random.seed() fixes the lattice.
        rng = rng if rng is not None else np.random
        vectors = rng.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        self.ranvec = vectors / np.linalg.norm(vectors, axis=1, keepdims=True)
        self.perm_x = rng.permutation(self.POINT_COUNT)
        self.perm_y = rng.permutation(self.POINT_COUNT)
        self.perm_z = rng.permutation(self.POINT_COUNT)

    def noise(self, p: Point3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite smoothing
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    index = (self.perm_x[(i + di) & 255]
                             ^ self.perm_y[(j + dj) & 255]
                             ^ self.perm_z[(k + dk) & 255])
                    gx, gy, gz = self.ranvec[index]
                    weight = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * weight)
        return float(accum)

    def turb(self, p: Point3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, rng: np.random.Generator = None):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, uv: UV, p: Point3) -> Color:
        phase = self.scale * p.z + 10.0 * self.noise.turb(p * self.scale)
        return Vector3(1.0, 1.0, 1.0) * (0.5 * (1.0 + math.sin(phase)))


class ImageTexture(Texture):
    """
    A texture backed by an (height, width, 3) float array in [0, 1].
    Use materials.texture_loader.load_texture() to read one from disk.
    """
    def __init__(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Expected an (height, width, 3) image array, got shape {data.shape}")
        self.data = data
        self.height, self.width = data.shape[:2]

    def value(self, uv: UV, p: Point3) -> Color:
        uv = uv.clamped()
        u = uv.u
        v = 1.0 - uv.v  # Image rows run top to bottom

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
