"""
Recursive path tracing estimator.

ray_color() returns one Monte Carlo sample of the radiance arriving along a
ray: the emission of the surface it hits plus, when the surface scatters,
the material-weighted radiance of one sampled continuation ray. Paths are
truncated after a fixed number of bounces.
"""
import math
from core.ray import Ray
from core.vector import Color

# Rays spawned on a surface ignore hits closer than this ("shadow acne").
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)


def ray_color(ray: Ray, background: Color, world, lights, depth: int) -> Color:
    """
    Args:
        ray: The ray to trace.
        background: Radiance returned for rays that leave the scene.
        world: Scene root (any Hittable, usually a BVH).
        lights: Hittable aggregate of light shapes to importance-sample,
            or None for pure material sampling.
        depth: Remaining bounces; at zero or below the path contributes black.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background

    emitted = rec.material.emitted(rec.uv, rec.p)
    scattered = rec.material.scatter(ray, rec, lights)
    if scattered is None:
        return emitted

    direction, attenuation = scattered
    incoming = ray_color(Ray(rec.p, direction), background, world, lights, depth - 1)
    return emitted + attenuation * incoming
