# renderer/image_output.py
import os
import numpy as np
from PIL import Image

def to_bytes(pixels: np.ndarray) -> np.ndarray:
    """
    Quantize linear colors to 8-bit samples by truncating channel * 255.
    Channels are clipped to [0, 1] first so the cast is defined.
    """
    return (np.clip(pixels, 0.0, 1.0) * 255).astype(np.uint8)

def write_ppm(pixels: np.ndarray, path: str):
    """Writes a binary PPM (P6) file, rows top to bottom."""
    data = to_bytes(pixels)
    height, width = data.shape[:2]
    with open(path, "wb") as f:
        f.write(f"P6 {width} {height} 255\n".encode("ascii"))
        f.write(data.tobytes())

def save_image(pixels: np.ndarray, path: str):
    """
    Save a rendered frame. `.ppm` files are written directly, anything else
    goes through Pillow and takes its format from the extension.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        write_ppm(pixels, path)
        return
    try:
        Image.fromarray(to_bytes(pixels)).save(path)
    except (KeyError, ValueError) as e:
        raise ValueError(f"Cannot save image {path}: {str(e)}") from e

def show_preview(pixels: np.ndarray, title: str = "Ray Tracer"):
    """Display a rendered frame in a pygame window until it is closed."""
    import pygame

    height, width = pixels.shape[:2]
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray is indexed (x, y), the frame is (row, col)
        frame_surface = pygame.surfarray.make_surface(to_bytes(pixels).transpose(1, 0, 2))
        screen.blit(frame_surface, (0, 0))
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
