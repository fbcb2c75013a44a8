# renderer/raytracer.py
import os
import queue
import random
import sys
import threading
from typing import Iterator, Optional, TextIO, Tuple
import numpy as np
from camera.camera import Camera
from core.color import BLACK
from core.errors import ConfigurationError
from core.vector import Vector3
from geometry.hittable import Hittable
from .integrator import T_MAX, T_MIN, ray_color

# Sent once per worker to shut the pool down.
_STOP = None


class Renderer:
    """
    Turns a world seen through a camera into a linear RGB image.

    Two strategies produce the same image layout. The sequential one walks
    every pixel and sample on the calling thread. The parallel one keeps a
    fixed pool of worker threads alive for the whole render: the calling
    thread queues one pixel's worth of sample requests, collects exactly
    that many colors back and averages them before moving on, so pixels
    always come out in raster order.

    Each worker draws from its own random.Random seeded with seed + index + 1.
    Sequential renders with a fixed seed are reproducible bit for bit;
    parallel renders are not, since which worker takes which sample varies.
    """

    def __init__(self, camera: Camera, parallel: bool = False,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 log: Optional[TextIO] = sys.stderr):
        if workers is None:
            workers = os.cpu_count() or 1
        if workers <= 0:
            raise ConfigurationError(f"workers must be > 0, got {workers}")
        self.camera = camera
        self.parallel = parallel
        self.workers = workers
        self.seed = seed
        self.log = log

    @property
    def width(self) -> int:
        return self.camera.width

    @property
    def height(self) -> int:
        return self.camera.height

    def render(self, world: Hittable) -> np.ndarray:
        """
        Renders world and returns a (height, width, 3) float64 array.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for i, j, color in self.iter_pixels(world):
            image[j, i] = (color.x, color.y, color.z)
        return image

    def iter_pixels(self, world: Hittable) -> Iterator[Tuple[int, int, Vector3]]:
        """
        Yields (i, j, color) for every pixel, row by row from the top left.
        """
        if self.parallel:
            return self._render_parallel(world)
        return self._render_sequential(world)

    def sample(self, world: Hittable, i: int, j: int, rng: random.Random) -> Vector3:
        """Traces a single jittered sample through pixel (i, j)."""
        ray = self.camera.get_ray(i, j, rng)
        return ray_color(ray, world, T_MIN, T_MAX, self.camera.max_bounces, rng)

    def _render_sequential(self, world: Hittable) -> Iterator[Tuple[int, int, Vector3]]:
        rng = random.Random(self.seed)
        spp = self.camera.samples_per_pixel
        for j in range(self.height):
            self._report_progress(j)
            for i in range(self.width):
                pixel = BLACK
                for _ in range(spp):
                    pixel = pixel + self.sample(world, i, j, rng)
                yield i, j, pixel / spp
        self._report_done()

    def _render_parallel(self, world: Hittable) -> Iterator[Tuple[int, int, Vector3]]:
        spp = self.camera.samples_per_pixel
        # Both queues hold a full pixel so neither side can deadlock.
        positions = queue.Queue(maxsize=spp)
        samples = queue.Queue(maxsize=spp)

        threads = []
        for k in range(self.workers):
            thread = threading.Thread(
                target=self._sample_worker,
                args=(world, positions, samples, random.Random(self._worker_seed(k))),
                name=f"sample-worker-{k}",
                daemon=True,
            )
            thread.start()
            threads.append(thread)

        try:
            for j in range(self.height):
                self._report_progress(j)
                for i in range(self.width):
                    for _ in range(spp):
                        positions.put((i, j))

                    pixel = BLACK
                    for _ in range(spp):
                        result = samples.get()
                        if isinstance(result, BaseException):
                            raise result
                        pixel = pixel + result
                    yield i, j, pixel / spp
            self._report_done()
        finally:
            for _ in threads:
                positions.put(_STOP)
            for thread in threads:
                thread.join()

    def _sample_worker(self, world: Hittable, positions: queue.Queue,
                       samples: queue.Queue, rng: random.Random):
        while True:
            position = positions.get()
            if position is _STOP:
                break
            i, j = position
            try:
                samples.put(self.sample(world, i, j, rng))
            except Exception as e:
                # Re-raised by the coordinating thread.
                samples.put(e)

    def _worker_seed(self, index: int) -> Optional[int]:
        if self.seed is None:
            return None
        return self.seed + index + 1

    def _report_progress(self, row: int):
        if self.log is not None:
            print(f"\rScanlines remaining: {self.height - row} ", end="", file=self.log, flush=True)

    def _report_done(self):
        if self.log is not None:
            print("\rDone.                    ", file=self.log, flush=True)
