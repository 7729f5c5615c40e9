# main.py
import math
import click
import pygame
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.presets import ColorPresets, MaterialPresets, LightPresets
from renderer.framebuffer import Framebuffer
from renderer.image_io import framebuffer_to_image, write_image
from renderer.raytracer import MAX_DEPTH, Renderer
from renderer.tone_mapping import TONE_MAPPERS

# Resolution scale and bounce limit per quality level
QUALITY_LEVELS = {
    "draft": {"scale": 0.25, "max_depth": 1},
    "balanced": {"scale": 0.5, "max_depth": 2},
    "final": {"scale": 1.0, "max_depth": MAX_DEPTH},
}

def create_world():
    """Build the default scene: a ground sphere, three spheres and two lights."""
    world = HittableList()

    print("\n=== Creating World ===")

    world.add(Sphere(Vector3(0, -1004, -20), 1000, MaterialPresets.matte(ColorPresets.TAN)))
    print("Added ground sphere at (0, -1004, -20) with radius 1000")

    world.add(Sphere(Vector3(-3, 0, -16), 2, MaterialPresets.mirror()))
    print("Added mirror sphere at (-3, 0, -16) with radius 2")

    world.add(Sphere(Vector3(1.5, -0.5, -12), 1.5, MaterialPresets.plastic(ColorPresets.RED)))
    print("Added red plastic sphere at (1.5, -0.5, -12) with radius 1.5")

    world.add(Sphere(Vector3(7, 3, -18), 4, MaterialPresets.chrome()))
    print("Added chrome sphere at (7, 3, -18) with radius 4")

    world.add(Sphere(Vector3(-1, -2.5, -9), 1, MaterialPresets.matte(ColorPresets.BLUE)))
    print("Added blue matte sphere at (-1, -2.5, -9) with radius 1")

    lights = [
        LightPresets.key_light(Vector3(-20, 20, 20), 1.5),
        LightPresets.fill_light(Vector3(30, 50, -25), 0.8),
    ]
    print(f"Added {len(lights)} point lights")
    return world, lights

def preview(framebuffer: Framebuffer, tone_mapping: str = "rescale"):
    """Show the rendered image in a window until it is closed or Escape is pressed."""
    image = framebuffer_to_image(framebuffer, tone_mapping)
    pygame.init()
    try:
        screen = pygame.display.set_mode(image.size)
        pygame.display.set_caption("Whitted Ray Tracer")
        surface = pygame.image.frombuffer(image.tobytes(), image.size, "RGB")
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()

@click.command()
@click.option("--width", type=click.INT, default=640, show_default=True)
@click.option("--height", type=click.INT, default=480, show_default=True)
@click.option("--fov", type=click.FLOAT, default=90.0, show_default=True, help="Vertical field of view in degrees.")
@click.option("--max-depth", type=click.INT, default=None, help="Reflection bounces, overrides the quality level.")
@click.option("--quality", type=click.Choice(sorted(QUALITY_LEVELS)), default="final", show_default=True)
@click.option("--workers", type=click.INT, default=1, show_default=True)
@click.option("--tone-map", "tone_mapping", type=click.Choice(sorted(TONE_MAPPERS)), default="rescale", show_default=True)
@click.option("--output", "output_path", type=click.Path(dir_okay=False), default="image.ppm", show_default=True)
@click.option("--preview/--no-preview", "show_preview", default=False, help="Show the result in a window.")
@click.option("--debug", is_flag=True, default=False, help="Print render progress.")
def cli(width, height, fov, max_depth, quality, workers, tone_mapping, output_path, show_preview, debug):
    settings = QUALITY_LEVELS[quality]
    render_width = int(width * settings["scale"])
    render_height = int(height * settings["scale"])
    if max_depth is None:
        max_depth = settings["max_depth"]

    print("\n=== Initializing Renderer ===")
    print(f"Render resolution: {render_width}x{render_height}")
    print(f"Quality settings: {quality}")
    print(f"Max bounces: {max_depth}")

    try:
        camera = Camera(render_width, render_height, math.radians(fov))
        renderer = Renderer(render_width, render_height, max_depth=max_depth, debug_mode=debug)
    except ValueError as e:
        raise click.BadParameter(str(e))

    world, lights = create_world()
    framebuffer = renderer.render(world, lights, camera, workers=workers)

    write_image(framebuffer, output_path, tone_mapping)
    print(f"Saved: {output_path}")

    if show_preview:
        preview(framebuffer, tone_mapping)

if __name__ == "__main__":
    cli()
