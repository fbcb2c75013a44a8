# main.py
import random
import sys
import time
import click
from camera.camera import Camera
from core.errors import ConfigurationError
from renderer.image_io import save_image, write_ppm
from renderer.raytracer import Renderer
from scenes import SCENES


@click.command()
@click.option("--scene", type=click.Choice(sorted(SCENES)), default="simple", show_default=True)
@click.option("--width", type=click.INT, default=None, help="Image width in pixels.")
@click.option("--samples", type=click.INT, default=None, help="Samples per pixel.")
@click.option("--bounces", type=click.INT, default=None, help="Maximum bounce depth.")
@click.option("--parallel/--sequential", default=False, show_default=True)
@click.option("--workers", type=click.INT, default=None, help="Worker threads (default: CPU count).")
@click.option("--seed", type=click.INT, default=None, help="Seed for scene and sampling.")
@click.option("--output", type=click.Path(dir_okay=False, allow_dash=True), default="-",
              show_default=True, help="Output file; '-' writes PPM to stdout.")
@click.option("--show", is_flag=True, help="Show the finished render in a window.")
@click.option("--quiet", is_flag=True, help="Suppress progress output.")
def main(scene, width, samples, bounces, parallel, workers, seed, output, show, quiet):
    log = None if quiet else sys.stderr

    world, camera_kwargs = SCENES[scene](random.Random(seed))
    overrides = dict(width=width, samples_per_pixel=samples, max_bounces=bounces)
    camera_kwargs.update({k: v for k, v in overrides.items() if v is not None})

    try:
        camera = Camera(**camera_kwargs)
        renderer = Renderer(camera, parallel=parallel, workers=workers, seed=seed, log=log)
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    if log is not None:
        strategy = f"parallel ({renderer.workers} workers)" if parallel else "sequential"
        print(f"Rendering '{scene}' scene with {len(world)} objects at "
              f"{camera.width}x{camera.height}, {camera.samples_per_pixel} samples, "
              f"{strategy}", file=log)

    start = time.time()
    image = renderer.render(world)
    if log is not None:
        print(f"Rendered in {time.time() - start:.2f}s", file=log)

    if output == "-":
        write_ppm(image, sys.stdout)
    else:
        save_image(image, output)
        if log is not None:
            print(f"Saved {output}", file=log)

    if show:
        from renderer.display import show_image
        show_image(image, title=f"Path Tracer - {scene}")


if __name__ == "__main__":
    main()
