# camera/camera.py
import math
import random
from core.utils import random_in_unit_disk
from core.vector import Point3, Vector3
from core.ray import Ray


class Camera:
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        """
        Args:
            vfov: Vertical field of view in degrees.
            aperture: Lens diameter; 0 gives a pinhole camera.
            focus_dist: Distance to the plane in perfect focus.
        """
        self.position = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # Camera looks along -backward
        self.backward = (self.position - self.look_at).normalize()
        self.right = self.vup.cross(self.backward).normalize()
        self.up = self.backward.cross(self.right)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(math.radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position -
                                  self.backward * self.focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, s: float, t: float, rng=None) -> Ray:
        """
        Ray through normalized image coordinates (s, t) in [0, 1]^2,
        (0, 0) being the lower left corner.
        """
        if self.aperture <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.position)
            return Ray(self.position, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng or random) * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
