import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.common import Ray, RenderOptions, normalize, reflect
from raytracer.frame import Frame
from raytracer.light import DirectionalLight, Light, Lighting, PointLight
from raytracer.material import Material
from raytracer.trace import Solid, SolidHit

logger = logging.getLogger(__name__)


@dataclass
class SceneObject:
    solid: Solid
    material: Material


@dataclass
class Scene:
    """Everything needed to render a frame.

    The scene must not be modified while :func:`draw` is running.
    """

    objects: List[SceneObject]
    camera: Camera
    lighting: Lighting
    background: Color = field(default_factory=lambda: Color.from_rgb(0.0, 0.0, 0.0))


def draw(scene: Scene, options: RenderOptions = RenderOptions()) -> Frame[Color]:
    camera = scene.camera
    width, height = camera.image_resolution
    frame = Frame(width, height, scene.background)

    logger.debug(
        "Drawing %dx%d frame: %d objects, %d lights, max ray depth %d",
        width, height, len(scene.objects), len(scene.lighting.lights), options.max_ray_depth,
    )

    hits = 0
    for y in range(height):
        for x in range(width):
            color = cast_ray(scene, options, camera.pixel_ray(x, y), 0)
            if color is not None:
                frame.set(x, y, color.clamped())
                hits += 1

    logger.debug("Finished frame, %d of %d pixels hit", hits, width * height)
    return frame


def cast_ray(scene: Scene, options: RenderOptions, ray: Ray, depth: int = 0) -> Optional[Color]:
    """Trace ``ray`` into the scene and return the light it carries back.

    Returns ``None`` if nothing is hit, in which case the caller decides what
    the ray sees (``draw`` keeps the background). While ``depth`` is below
    ``options.max_ray_depth`` the result is the mirror reflection alone;
    at the last level it is the shadowed direct light plus the ambient term.
    """
    nearest = nearest_hit(scene, ray)
    if nearest is None:
        return None

    hit, obj = nearest
    shading_point = hit.point + hit.normal * options.shadow_bias

    direct = Color.sum(
        compute_light(scene, ray, hit, obj.material, light, shading_point)
        for light in scene.lighting.lights
    )

    if depth < options.max_ray_depth:
        reflected = Ray(shading_point, reflect(ray.direction, hit.normal))
        return cast_ray(scene, options, reflected, depth + 1)

    return direct + scene.lighting.ambient


def nearest_hit(scene: Scene, ray: Ray) -> Optional[Tuple[SolidHit, SceneObject]]:
    nearest: Optional[Tuple[SolidHit, SceneObject]] = None
    dist_to_nearest = float("inf")
    for obj in scene.objects:
        hit = obj.solid.intersect(ray)
        if hit is None:
            continue

        dist = float(np.linalg.norm(hit.point - ray.origin))
        if dist < dist_to_nearest:
            dist_to_nearest = dist
            nearest = (hit, obj)

    return nearest


def is_in_shadow(scene: Scene, point: NDArray[np.float64], dir_to_light: NDArray[np.float64], dist_to_light: float) -> bool:
    shadow_ray = Ray(point, dir_to_light)
    for obj in scene.objects:
        hit = obj.solid.intersect(shadow_ray)
        if hit is not None and np.linalg.norm(hit.point - point) < dist_to_light:
            return True

    return False


def compute_light(
    scene: Scene,
    ray: Ray,
    hit: SolidHit,
    material: Material,
    light: Light,
    shading_point: NDArray[np.float64],
) -> Color:
    """Direct light arriving at ``hit`` from ``light`` and reflected along ``-ray.direction``."""
    light_type = light.light_type
    if isinstance(light_type, PointLight):
        to_light = light_type.position - hit.point
        dist_to_light = float(np.linalg.norm(to_light))
        dir_to_light = normalize(to_light)

        if is_in_shadow(scene, shading_point, dir_to_light, dist_to_light):
            return Color.zero()

        return material.brdf(-ray.direction, dir_to_light, light.intensity, hit.normal)

    if isinstance(light_type, DirectionalLight):
        raise NotImplementedError("Directional lights are not supported by the renderer")

    raise TypeError(f"Unknown light type {type(light_type).__name__}")
