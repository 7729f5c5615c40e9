# renderer/raytracer.py
import time
from multiprocessing import Pool
from typing import List, Sequence
from core.vector import Vector3
from core.ray import Ray
from core.utils import clamp, reflect
from camera.camera import Camera
from geometry.hittable import HitRecord
from geometry.world import HittableList
from materials.light import Light
from renderer.framebuffer import Framebuffer

MAX_DEPTH = 4
BIAS = 1e-6
BACKGROUND_COLOR = Vector3(0.298, 0.7058, 0.9843)
SHADOW_PENALTY = 0.02

WHITE = Vector3(1.0, 1.0, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

class Renderer:
    """
    Recursive Whitted ray tracer: Phong local lighting with hard shadows plus
    mirror reflection traced up to ``max_depth`` bounces.

    The renderer holds no per-render state, so one instance can shade pixels
    from several worker processes at once as long as the scene is not mutated.
    """
    def __init__(self, width: int, height: int, max_depth: int = MAX_DEPTH,
                 background: Vector3 = BACKGROUND_COLOR, bias: float = BIAS,
                 shadow_penalty: float = SHADOW_PENALTY, debug_mode: bool = False):
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative, got {}".format(max_depth))
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.background = background
        self.bias = bias
        self.shadow_penalty = shadow_penalty
        self.debug_mode = debug_mode

    def trace(self, ray: Ray, world: HittableList, lights: Sequence[Light], depth: int = 0) -> Vector3:
        """
        Returns the radiance arriving along ``ray``, or the background color
        if it hits nothing.
        """
        hit = world.hit(ray)
        if hit is None:
            return self.background
        return self.shade(ray, hit, world, lights, depth)

    def shade(self, ray: Ray, hit: HitRecord, world: HittableList,
              lights: Sequence[Light], depth: int) -> Vector3:
        material = hit.material
        normal = hit.shading_normal()
        incoming = ray.direction.normalize()
        view = -incoming
        # Secondary rays start just off the surface, on the side the ray came from.
        origin = hit.point + normal * self.bias

        reflection = BLACK
        if material.reflectiveness > 0 and depth < self.max_depth:
            mirror = Ray(origin, reflect(incoming, normal).normalize())
            reflection = self.trace(mirror, world, lights, depth + 1)

        diffuse = 0.0
        specular = 0.0
        obstructed = 0
        for light in lights:
            to_light = light.position - hit.point
            light_dir = to_light.normalize()
            cos_theta = normal.dot(light_dir)
            if cos_theta <= 0:
                continue

            if world.occluded(Ray(origin, light_dir), to_light.length()):
                obstructed += 1
                continue

            diffuse += cos_theta * light.intensity
            specular_dir = reflect(-light_dir, normal)
            highlight = clamp(specular_dir.dot(view)) ** material.shininess
            specular += highlight * material.specular * light.intensity

        color = (material.color * (diffuse + material.ambient)
                 + WHITE * specular
                 + reflection * material.reflectiveness
                 - WHITE * (self.shadow_penalty * obstructed))
        return color.clamp_min(0.0)

    def render_row(self, row: int, camera: Camera, world: HittableList,
                   lights: Sequence[Light]) -> List[Vector3]:
        return [self.trace(camera.get_ray(col, row), world, lights, 0) for col in range(self.width)]

    def render(self, world: HittableList, lights: Sequence[Light], camera: Camera = None,
               workers: int = 1) -> Framebuffer:
        """
        Traces one primary ray per pixel and returns the filled framebuffer.

        With ``workers > 1`` rows are distributed over a process pool; the
        result is identical to the sequential render.
        """
        if camera is None:
            camera = Camera(self.width, self.height)
        if (camera.width, camera.height) != (self.width, self.height):
            raise ValueError("camera is {}x{} but renderer is {}x{}".format(
                camera.width, camera.height, self.width, self.height))

        lights = list(lights)
        framebuffer = Framebuffer(self.width, self.height, self.background)
        start = time.perf_counter()
        if self.debug_mode:
            print(f"Rendering {self.width}x{self.height}, {len(world)} objects, "
                  f"{len(lights)} lights, max depth {self.max_depth}, workers {workers}")

        if workers > 1:
            # Each worker receives the scene once, then only row indices are sent.
            with Pool(workers, initializer=_init_worker,
                      initargs=(self, camera, world, lights)) as pool:
                rows = pool.imap(_render_row, range(self.height),
                                 chunksize=max(1, self.height // (workers * 4)))
                for row, colors in enumerate(rows):
                    framebuffer.set_row(row, colors)
                    self._report_progress(row)
        else:
            for row in range(self.height):
                framebuffer.set_row(row, self.render_row(row, camera, world, lights))
                self._report_progress(row)

        if self.debug_mode:
            print(f"Render finished in {time.perf_counter() - start:.2f}s")
        return framebuffer

    def _report_progress(self, row: int):
        step = max(1, self.height // 10)
        if self.debug_mode and (row + 1) % step == 0:
            print(f"  {row + 1}/{self.height} rows")

# Per-process scene set by the pool initializer
_worker_scene = {}

def _init_worker(renderer: Renderer, camera: Camera, world: HittableList,
                 lights: Sequence[Light]):
    _worker_scene.update(renderer=renderer, camera=camera, world=world, lights=lights)

def _render_row(row: int) -> List[Vector3]:
    scene = _worker_scene
    return scene["renderer"].render_row(row, scene["camera"], scene["world"], scene["lights"])
