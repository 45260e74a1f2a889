import numpy as np

# BGR pixel that passes the skin rule, intensity 140
SKIN_BGR = (100, 120, 200)
# Grey with the same intensity but not skin-toned (R == G)
GREY_BGR = (140, 140, 140)


def make_uniform_frame(height: int, width: int, bgr=GREY_BGR) -> np.ndarray:
    frame = np.empty((height, width, 3), dtype=np.uint8)
    frame[:] = bgr
    return frame


def make_noisy_skin(height: int, width: int, seed: int = 0, amplitude: int = 25) -> np.ndarray:
    """Skin-toned patch with a per-pixel offset shared across channels"""
    rng = np.random.default_rng(seed)
    noise = rng.integers(-amplitude, amplitude + 1, size=(height, width))
    patch = np.empty((height, width, 3), dtype=np.int32)
    for channel, base in enumerate(SKIN_BGR):
        patch[:, :, channel] = base + noise
    return np.clip(patch, 0, 255).astype(np.uint8)
