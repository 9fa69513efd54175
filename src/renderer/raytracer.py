# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional
import numpy as np
from core.vector import Color
from renderer.config import RenderSettings
from renderer.integrator import ray_color

logger = logging.getLogger(__name__)

# Read-only scene installed once per worker process by _init_worker().
_worker_state = {}


def _seed_streams(seed: int) -> None:
    random.seed(seed)
    np.random.seed(seed % (2 ** 32))


def _init_worker(renderer: "Renderer", world, lights, camera, background: Color) -> None:
    _worker_state.update(renderer=renderer, world=world, lights=lights,
                         camera=camera, background=background)


def _render_pass_task(seed: int) -> np.ndarray:
    state = _worker_state
    _seed_streams(seed)
    return state["renderer"].render_pass(state["world"], state["lights"],
                                         state["camera"], state["background"])


class Renderer:
    """
    CPU path tracing renderer.

    A render is a fork/join over `samples_per_pixel` independent passes.
    Each pass traces one jittered camera ray per pixel into its own buffer,
    seeded from its own stream; the buffers are summed into the
    accumulation buffer and averaged at the end. The scene is only read.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings.validate()
        self.width = settings.width
        self.height = settings.height
        self.max_depth = settings.max_depth
        self.reset_accumulation()

    def reset_accumulation(self) -> None:
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.samples = 0

    def accumulate(self, buffer: np.ndarray) -> None:
        self.accumulation_buffer += buffer
        self.samples += 1

    def average(self) -> np.ndarray:
        if self.samples == 0:
            return np.zeros_like(self.accumulation_buffer)
        return self.accumulation_buffer / self.samples

    def pass_seeds(self, count: int) -> List[int]:
        """One independent seed per pass, derived from settings.seed."""
        sequence = np.random.SeedSequence(self.settings.seed)
        return [int(s) for s in sequence.generate_state(count, dtype=np.uint64)]

    def render_pass(self, world, lights, camera, background: Color) -> np.ndarray:
        """
        Trace one sample per pixel. Row 0 of the result is the top of the image.
        """
        buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        s_scale = 1.0 / max(self.width - 1, 1)
        t_scale = 1.0 / max(self.height - 1, 1)
        for j in range(self.height):
            row = buffer[self.height - 1 - j]
            for i in range(self.width):
                s = (i + random.random()) * s_scale
                t = (j + random.random()) * t_scale
                color = ray_color(camera.get_ray(s, t), background, world, lights, self.max_depth)
                row[i] = (color.x, color.y, color.z)
        return buffer

    def render(self, world, lights, camera, background: Color,
               samples: Optional[int] = None) -> np.ndarray:
        """
        Render `samples` passes (default: settings.samples_per_pixel) and
        return the averaged linear radiance image.
        """
        samples = self.settings.samples_per_pixel if samples is None else samples
        seeds = self.pass_seeds(samples)
        workers = min(self.settings.workers, samples)
        self.reset_accumulation()
        start = time.perf_counter()
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s)",
                    self.width, self.height, samples, self.max_depth, workers)

        if workers <= 1:
            for index, seed in enumerate(seeds):
                _seed_streams(seed)
                self.accumulate(self.render_pass(world, lights, camera, background))
                logger.debug("Finished pass %d/%d", index + 1, samples)
        else:
            with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                     initargs=(self, world, lights, camera, background)) as executor:
                for index, buffer in enumerate(executor.map(_render_pass_task, seeds)):
                    self.accumulate(buffer)
                    logger.debug("Finished pass %d/%d", index + 1, samples)

        logger.info("Rendered %d passes in %.2fs", samples, time.perf_counter() - start)
        return self.average()
