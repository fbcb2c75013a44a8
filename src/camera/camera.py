# camera/camera.py
import math
import random
from core.errors import ConfigurationError
from core.utils import degrees_to_radians, random_in_unit_disk
from core.vector import Vector3
from core.ray import Ray


class Viewport:
    """
    The image plane in world space. Increasing i moves right, increasing j
    moves down. Derived once from the camera and never changed.
    """
    def __init__(self, width: float, height: float, horizontal: Vector3,
                 vertical: Vector3, pixel_delta_u: Vector3, pixel_delta_v: Vector3,
                 upper_left: Vector3, first_pixel_center: Vector3):
        self.width = width
        self.height = height
        self.horizontal = horizontal
        self.vertical = vertical
        self.pixel_delta_u = pixel_delta_u
        self.pixel_delta_v = pixel_delta_v
        self.upper_left = upper_left
        self.first_pixel_center = first_pixel_center

    def pixel_position(self, i: float, j: float) -> Vector3:
        return self.first_pixel_center + self.pixel_delta_u * i + self.pixel_delta_v * j


class Camera:
    """
    A positionable camera with an optional thin lens.

    Every setting is validated on construction; invalid values raise
    ConfigurationError instead of being clamped. A focus_dist of 0 focuses
    on look_at, and a defocus_angle of 0 gives a pinhole camera.

    The image height is width / aspect_ratio rounded half up, and at least 1.
    """
    def __init__(self, width: int = 400, aspect_ratio: float = 16.0 / 9.0,
                 vertical_fov: float = 90.0, samples_per_pixel: int = 100,
                 max_bounces: int = 50, position: Vector3 = None,
                 look_at: Vector3 = None, up: Vector3 = None,
                 focus_dist: float = 0.0, defocus_angle: float = 0.0):
        if position is None:
            position = Vector3(0, 0, 0)
        if look_at is None:
            look_at = Vector3(0, 0, -1)
        if up is None:
            up = Vector3(0, 1, 0)

        if width <= 0:
            raise ConfigurationError(f"width must be > 0, got {width}")
        if aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be > 0, got {aspect_ratio}")
        if not 0 < vertical_fov < 180:
            raise ConfigurationError(
                f"vertical_fov must be between 0 and 180 degrees (exclusive), got {vertical_fov}"
            )
        if samples_per_pixel <= 0:
            raise ConfigurationError(f"samples_per_pixel must be > 0, got {samples_per_pixel}")
        if max_bounces <= 0:
            raise ConfigurationError(f"max_bounces must be > 0, got {max_bounces}")
        if position == look_at:
            raise ConfigurationError("position cannot be the same as look_at")
        if not 0 <= defocus_angle < 180:
            raise ConfigurationError(
                f"defocus_angle must be in [0, 180) degrees, got {defocus_angle}"
            )
        if focus_dist < 0:
            raise ConfigurationError(f"focus_dist must be >= 0, got {focus_dist}")
        if focus_dist == 0:
            focus_dist = (look_at - position).length()

        self.width = width
        self.height = max(1, int(math.floor(width / aspect_ratio + 0.5)))
        self.aspect_ratio = aspect_ratio
        self.vertical_fov = vertical_fov
        self.samples_per_pixel = samples_per_pixel
        self.max_bounces = max_bounces
        self.position = position
        self.look_at = look_at
        self.up_hint = up
        self.focus_dist = focus_dist
        self.defocus_angle = defocus_angle

        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        self.back = (self.position - self.look_at).normalize()
        right = self.up_hint.cross(self.back)
        if right.near_zero():
            raise ConfigurationError(
                "up and the direction from position to look_at cannot be parallel"
            )
        self.right = right.normalize()
        self.up = self.back.cross(self.right)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.right * defocus_radius
        self.defocus_disk_v = self.up * defocus_radius

        self.viewport = self.calculate_viewport()

    def calculate_viewport(self) -> Viewport:
        theta = degrees_to_radians(self.vertical_fov)
        view_height = 2.0 * self.focus_dist * math.tan(theta / 2)
        view_width = view_height * self.width / self.height

        horizontal = self.right * view_width
        # Pixel rows run top to bottom
        vertical = self.up * -view_height
        pixel_delta_u = horizontal / self.width
        pixel_delta_v = vertical / self.height
        upper_left = (self.position -
                      self.back * self.focus_dist -
                      horizontal / 2 -
                      vertical / 2)
        first_pixel_center = upper_left + (pixel_delta_u + pixel_delta_v) * 0.5

        return Viewport(view_width, view_height, horizontal, vertical,
                        pixel_delta_u, pixel_delta_v, upper_left, first_pixel_center)

    def get_ray(self, i: int, j: int, rng: random.Random) -> Ray:
        """
        Generates a jittered ray through pixel (i, j), starting on the
        defocus disk when depth of field is enabled.
        """
        origin = self.position
        if self.defocus_angle > 0:
            p = random_in_unit_disk(rng)
            origin = origin + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

        offset_u = rng.random() - 0.5
        offset_v = rng.random() - 0.5
        target = self.viewport.pixel_position(i + offset_u, j + offset_v)
        return Ray(origin, target - origin)
