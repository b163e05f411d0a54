# %% [markdown]
# # pixresample: Example usage

# %%
# !pip install -q mediapy pixresample

# %%
"""Simple examples of `pixresample` usage."""

import mediapy as media
import numpy as np

import pixresample

# %% [markdown]
# ### Upsample (magnify) a color image

# %%
array = np.random.default_rng(1).integers(0, 256, (4, 6, 4), dtype=np.uint8)  # 4x6 RGBA.
array[..., 3] = 255
upsampled = pixresample.resize(array, 32.0, 32.0, 'catmullrom')  # To 128x192 resolution.
media.show_images({'original 4x6': array, 'upsampled 128x192': upsampled}, height=128)

# %% [markdown]
# ### Compare the kernels

# %%
images = {
    f"kernel='{name}'": pixresample.resize(array, 16.0, 16.0, name)
    for name in pixresample.KERNELS
}
media.show_images(images, height=64)

# %% [markdown]
# ### Downsample (minify) a luminance image

# %% [markdown]
# The default window narrows with the scale factor, so fine detail aliases;
# `antialias=True` widens the window to prefilter the source.

# %%
yx = (np.moveaxis(np.indices((96, 192)), 0, -1) + (0.5, 0.5)) / 96
radius = np.linalg.norm(yx - (0.75, 0.5), axis=-1)
gray = (np.cos((radius + 0.1) ** 0.5 * 70.0) * 127.5 + 127.5).astype(np.uint8)
media.show_images({
    'original 96x192': gray,
    'downsampled 24x48': pixresample.resize_gray(gray, 0.25, 0.25, 'lanczos'),
    'antialiased 24x48': pixresample.resize_gray(gray, 0.25, 0.25, 'lanczos', antialias=True),
}, height=96)

# %% [markdown]
# ### Independent horizontal and vertical factors

# %%
stretched = pixresample.resize(gray, 0.5, 2.0)
media.show_images({'original 96x192': gray, 'stretched 192x96': stretched}, height=96)

# %% [markdown]
# ### Resize a sub-region of a buffer, using several threads

# %%
buffer = pixresample.PixelBuffer.from_array(gray)
region = buffer.sub_buffer(48, 24, 144, 72)  # Shares samples with `buffer`.
new = pixresample.resize(region, 2.0, 2.0, 'linear', num_threads=4, debug=True)
media.show_images({'region 48x96': region.to_array(), 'resized 96x192': new.to_array()}, height=96)
