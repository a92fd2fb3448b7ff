import logging

import numpy as np

from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.common import Settings, translation_matrix, vec3
from raytracer.display import frame_to_image
from raytracer.draw import Scene, SceneObject, draw
from raytracer.light import Light, Lighting
from raytracer.material import Lambertian, Phong
from raytracer.trace import Plane, Sphere

logger = logging.getLogger(__name__)


class App:
    def __init__(self, settings: Settings):
        self.settings = settings

        self.image = np.zeros(
            (settings.height, settings.width, 3),
            dtype=np.uint8,
        )
        self.frame = None

        self.scene = self.create_world()

    def run(self):
        logger.info(
            "Rendering %dx%d, %d bounces",
            self.settings.width, self.settings.height, self.settings.bounces,
        )
        self.frame = draw(self.scene, self.settings.render_options())
        self.image = frame_to_image(self.frame)
        logger.info("Render finished")

    def create_world(self) -> Scene:
        orange = Phong(diffuse=Color.from_rgb(1.0, 0.572, 0.184), albedo=2.0, specular_exponent=50)
        pink = Phong(diffuse=Color.from_rgb(0.5, 0.223, 0.5), albedo=2.0, specular_exponent=50)
        blue = Lambertian(diffuse=Color.from_rgb(0.0, 0.0, 1.0), albedo=2.0)
        floor = Lambertian(diffuse=Color.from_rgb(1.0, 1.0, 1.0), albedo=1.5)

        sphere_orange = Sphere(center=vec3(-1.5, 0.1, -3.5), radius=0.6)
        sphere_pink = Sphere(center=vec3(0.0, 0.1, -3.0), radius=0.6)
        sphere_blue = Sphere(center=vec3(1.5, 0.1, -2.5), radius=0.6)
        # y = -0.5
        floor_plane = Plane(normal=vec3(0.0, 1.0, 0.0), offset=-0.5)

        x, y, z = self.settings.camera_position
        camera = Camera(
            fov=self.settings.fov,
            image_resolution=(self.settings.width, self.settings.height),
            eye=translation_matrix(x, y, z),
        )

        lighting = Lighting(
            lights=[Light.point_light(vec3(5.0, 5.0, 2.0), intensity=1.5)],
            ambient=Color.from_argb(0.0, 0.05, 0.05, 0.05),
        )

        return Scene(
            objects=[
                SceneObject(sphere_orange, orange),
                SceneObject(sphere_pink, pink),
                SceneObject(sphere_blue, blue),
                SceneObject(floor_plane, floor),
            ],
            camera=camera,
            lighting=lighting,
            background=Color.from_rgb(0.1, 0.1, 0.15),
        )
