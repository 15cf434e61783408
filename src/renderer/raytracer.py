# renderer/raytracer.py
import multiprocessing as mp
import time
import numpy as np
from geometry.world import Scene

DEFAULT_MAX_DEPTH = 5

# Scene handed to each worker process once by the pool initializer
_worker_scene = None
_worker_max_depth = None

def _init_worker(scene: Scene, max_depth: int):
    global _worker_scene, _worker_max_depth
    _worker_scene = scene
    _worker_max_depth = max_depth

def render_row(scene: Scene, max_depth: int, row: int) -> np.ndarray:
    """Renders one image row as a (width, 3) float array."""
    out = np.zeros((scene.width, 3), dtype=np.float64)
    for col in range(scene.width):
        ray = scene.camera.get_ray(row, col, scene.width, scene.height)
        color = scene.shade(ray, max_depth)
        out[col] = (color.r, color.g, color.b)
    return out

def _render_worker_row(row: int):
    return row, render_row(_worker_scene, _worker_max_depth, row)

class Renderer:
    """
    Drives the per-pixel loop over a Scene.

    With `workers > 1` rows are spread over a process pool. Each pixel only
    reads the scene and writes its own slot, so the result is identical to
    the sequential path.
    """
    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, workers: int = 1, verbose: bool = False):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.max_depth = max_depth
        self.workers = workers
        self.verbose = verbose

    def render(self, scene: Scene) -> np.ndarray:
        """
        Returns a (height, width, 3) array of linear colors, row 0 at the top.
        """
        if self.verbose:
            print("\n=== Rendering ===")
            print(f"Resolution: {scene.width}x{scene.height}")
            print(f"Scene contains {len(scene.objects)} objects and {len(scene.lights)} lights")
            print(f"Max depth: {self.max_depth}")

        start_time = time.time()
        pixels = np.zeros((scene.height, scene.width, 3), dtype=np.float64)

        if self.workers == 1:
            for row in range(scene.height):
                pixels[row] = render_row(scene, self.max_depth, row)
        else:
            if self.verbose:
                print(f"Using parallel renderer with {self.workers} workers...")
            with mp.Pool(self.workers, initializer=_init_worker,
                         initargs=(scene, self.max_depth)) as pool:
                for row, values in pool.imap_unordered(_render_worker_row, range(scene.height)):
                    pixels[row] = values

        if self.verbose:
            print(f"Rendering time: {time.time() - start_time:.2f} seconds")
        return pixels

def render(scene: Scene, max_depth: int = DEFAULT_MAX_DEPTH) -> np.ndarray:
    """Renders `scene` sequentially with the given recursion depth bound."""
    return Renderer(max_depth).render(scene)
