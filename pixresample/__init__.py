"""pixresample: separable resizing of 8-bit luminance and RGBA pixel grids.

.. include:: ../README.md
"""

from __future__ import annotations

__docformat__ = 'google'
__version__ = '0.1.0'
__version_info__ = tuple(int(num) for num in __version__.split('.'))

from collections.abc import Callable, Sequence
import concurrent.futures
import dataclasses
import functools
import math
import typing
from typing import Any

import numpy as np
import numpy.typing as npt
import scipy.sparse

if typing.TYPE_CHECKING:
  _NDArray = npt.NDArray[Any]
  _ArrayLike = npt.ArrayLike
else:
  _NDArray = Any
  _ArrayLike = Any  # Else `pdoc` uses a long type expression for documentation.


def _check_eq(a: Any, b: Any) -> None:
  """If the two values or arrays are not equal, raise an exception with a useful message."""
  are_equal = np.all(a == b) if isinstance(a, np.ndarray) else a == b
  if not are_equal:
    raise AssertionError(f'{a!r} == {b!r}')


def _sinc(x: _ArrayLike) -> _NDArray:
  """Return the value `np.sinc(x)` but improved to:
  (1) ignore underflow that occurs at 0.0 for np.float32, and
  (2) output exact zero for integer input values.

  >>> _sinc(np.array([-3, -2, -1, 0], dtype=np.float32))
  array([0., 0., 0., 1.], dtype=float32)

  >>> _sinc(0)
  1.0
  """
  x = np.asarray(x)
  x_is_scalar = x.ndim == 0
  with np.errstate(under='ignore'):
    result = np.sinc(np.atleast_1d(x))
    result[x == np.floor(x)] = 0.0
    result[x == 0] = 1.0
    return result.item() if x_is_scalar else result


def _cache_sampled_1d_function(
    xmin: float, xmax: float, *, num_samples: int = 3_600, enable: bool = True,
) -> Callable[[Callable[[_ArrayLike], _NDArray]], Callable[[_ArrayLike], _NDArray]]:
  """Function decorator to linearly interpolate cached function values."""

  def wrap_it(func: Callable[[_ArrayLike], _NDArray]) -> Callable[[_ArrayLike], _NDArray]:
    if not enable:
      return func

    dx = (xmax - xmin) / num_samples
    x = np.linspace(xmin, xmax + dx, num_samples + 2, dtype=np.float32)
    samples_func = func(x)
    assert np.all(samples_func[[0, -1, -2]] == 0.0)

    @functools.wraps(func)
    def interpolate_using_cached_samples(x: _ArrayLike) -> _NDArray:
      x = np.asarray(x)
      index_float = np.clip((x - xmin) / dx, 0.0, num_samples)
      index = index_float.astype(np.int64)
      frac = np.subtract(index_float, index, dtype=np.float32)
      return (1 - frac) * samples_func[index] + frac * samples_func[index + 1]

    return interpolate_using_cached_samples

  return wrap_it


class InvalidScaleError(ValueError):
  """A scale factor is not a finite number greater than zero."""


class UnknownKernelError(ValueError):
  """The kernel selector is not one of `KERNELS`."""


GRAY = 1
"""Number of channels in a luminance buffer."""

RGBA = 4
"""Number of channels in a color buffer (red, green, blue, alpha)."""

CHANNELS = (GRAY, RGBA)
"""Supported numbers of channels per pixel."""


@dataclasses.dataclass(frozen=True, eq=False)
class PixelBuffer:
  """Rectangular grid of 8-bit samples with `GRAY` (1) or `RGBA` (4) channels per pixel.

  The samples live in `storage`, a `uint8` array of shape `(rows, columns, channels)` addressed
  with absolute coordinates: sample `(x, y)` is `storage[y, x]`.  The buffer covers the half-open
  rectangle `bounds = (x0, y0, x1, y1)` of that storage, and `origin = (x0, y0)` is its top-left
  sample.  A sub-region view (`sub_buffer`) shares `storage` with its parent and differs only in
  `bounds`; `view()` and the resize operations offset every access by its origin.

  Buffers created by `new_buffer`, `from_array`, or any resize operation have origin `(0, 0)`.
  """

  storage: _NDArray
  """Sample values, as a `uint8` array of shape `(rows, columns, channels)`."""

  bounds: tuple[int, int, int, int]
  """Covered region `(x0, y0, x1, y1)` of `storage`, in absolute coordinates."""

  def __post_init__(self) -> None:
    storage = self.storage
    if not isinstance(storage, np.ndarray) or storage.dtype != np.uint8:
      raise ValueError(f'Storage {type(storage)} is not a uint8 numpy array.')
    if storage.ndim != 3 or storage.shape[2] not in CHANNELS:
      raise ValueError(f'Storage shape {storage.shape} is not (rows, columns, {CHANNELS}).')
    x0, y0, x1, y1 = self.bounds
    if not (0 <= x0 <= x1 <= storage.shape[1] and 0 <= y0 <= y1 <= storage.shape[0]):
      raise ValueError(f'Bounds {self.bounds} lie outside storage shape {storage.shape[:2]}.')

  @classmethod
  def from_array(cls, array: _ArrayLike) -> PixelBuffer:
    """Return a buffer (with origin `(0, 0)`) on a `uint8` array of shape `(height, width)` or
    `(height, width, channels)`.  The buffer shares memory with `array` when possible."""
    array = np.asarray(array)
    if array.dtype != np.uint8:
      raise ValueError(f'Type {array.dtype} is not uint8.')
    if array.ndim == 2:
      array = array[..., None]
    if array.ndim != 3 or array.shape[2] not in CHANNELS:
      raise ValueError(f'Shape {array.shape} is not (height, width) or (height, width, channels)'
                       f' with channels in {CHANNELS}.')
    height, width = array.shape[:2]
    return cls(storage=array, bounds=(0, 0, width, height))

  @property
  def origin(self) -> tuple[int, int]:
    """Absolute coordinates `(x0, y0)` of the top-left sample."""
    return self.bounds[0], self.bounds[1]

  @property
  def width(self) -> int:
    return self.bounds[2] - self.bounds[0]

  @property
  def height(self) -> int:
    return self.bounds[3] - self.bounds[1]

  @property
  def size(self) -> tuple[int, int]:
    """Resolution `(width, height)`."""
    return self.width, self.height

  @property
  def channels(self) -> int:
    return int(self.storage.shape[2])

  def _check_inside(self, x: int, y: int, channel: int) -> None:
    x0, y0, x1, y1 = self.bounds
    if not (x0 <= x < x1 and y0 <= y < y1):
      raise IndexError(f'Sample ({x}, {y}) lies outside bounds {self.bounds}.')
    if not 0 <= channel < self.channels:
      raise IndexError(f'Channel {channel} is not in range({self.channels}).')

  def get_sample(self, x: int, y: int, channel: int = 0) -> int:
    """Return the value of `channel` at absolute coordinates `(x, y)`."""
    self._check_inside(x, y, channel)
    return int(self.storage[y, x, channel])

  def set_sample(self, x: int, y: int, channel: int, value: int) -> None:
    """Store `value` (in range [0, 255]) into `channel` at absolute coordinates `(x, y)`."""
    self._check_inside(x, y, channel)
    if not 0 <= value <= 255:
      raise ValueError(f'Sample value {value} is outside the range [0, 255].')
    self.storage[y, x, channel] = value

  def sub_buffer(self, x0: int, y0: int, x1: int, y1: int) -> PixelBuffer:
    """Return a view on the region `[x0, x1) x [y0, y1)` (absolute coordinates) sharing storage."""
    bx0, by0, bx1, by1 = self.bounds
    if not (bx0 <= x0 <= x1 <= bx1 and by0 <= y0 <= y1 <= by1):
      raise ValueError(f'Region {(x0, y0, x1, y1)} is not within bounds {self.bounds}.')
    return PixelBuffer(storage=self.storage, bounds=(x0, y0, x1, y1))

  def view(self) -> _NDArray:
    """Return the covered samples as an array view of shape `(height, width, channels)`."""
    x0, y0, x1, y1 = self.bounds
    return self.storage[y0:y1, x0:x1]

  def to_array(self) -> _NDArray:
    """Return a copy of the samples, with shape `(height, width)` for a `GRAY` buffer or
    `(height, width, 4)` for an `RGBA` buffer."""
    array = self.view().copy()
    return array[..., 0] if self.channels == GRAY else array


def new_buffer(width: int, height: int, channels: int = GRAY) -> PixelBuffer:
  """Return a zero-initialized buffer of resolution `(width, height)` with origin `(0, 0)`."""
  if width < 0 or height < 0:
    raise ValueError(f'Resolution ({width}, {height}) is negative.')
  if channels not in CHANNELS:
    raise ValueError(f'Number of channels {channels} is not in {CHANNELS}.')
  return PixelBuffer(storage=np.zeros((height, width, channels), np.uint8),
                     bounds=(0, 0, width, height))


@dataclasses.dataclass(frozen=True)
class Kernel:
  """Base class for the reconstruction kernels.

  Each kernel is a zero-phase filter, i.e., it is symmetric about zero, and it evaluates to
  exactly zero outside the support interval [-radius, radius].  The set of kernels is closed:
  `NearestKernel`, `LinearKernel`, `CatmullRomKernel`, and `LanczosKernel`.
  """

  name: str
  """Kernel name."""

  radius: float
  """Max absolute value of x for which self(x) is nonzero."""

  def __call__(self, x: _ArrayLike) -> _NDArray:
    """Return evaluation of the kernel at signed distances x (in source-sample units)."""
    raise NotImplementedError


class NearestKernel(Kernel):
  """Selects the source sample closest to each output sample.

  It has no weight function; resizing maps output indices directly onto source indices.
  """

  def __init__(self) -> None:
    super().__init__(name='nearest', radius=0.5)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    raise AssertionError('The nearest kernel has no weight function, so cannot be evaluated.')


class LinearKernel(Kernel):
  """See https://en.wikipedia.org/wiki/Triangle_function.

  Also known as the hat or tent function.  It is used for piecewise-linear
  (bilinear in 2D) interpolation.
  """

  def __init__(self) -> None:
    super().__init__(name='linear', radius=1.0)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    return (1.0 - np.abs(x)).clip(0.0, 1.0)


class CatmullRomKernel(Kernel):
  """Cubic kernel with cubic precision.  Also known as Keys filter.

  It is the member (b=0, c=0.5) of the Mitchell-Netravali cubic family.  It is sharper than
  `LinearKernel` but its negative lobes may cause mild overshoot near edges.

  [E. Catmull, R. Rom.  A class of local interpolating splines.  Computer aided geometric
  design, 1974]
  [R. G. Keys.  Cubic convolution interpolation for digital image processing.
  IEEE Trans. on Acoustics, Speech, and Signal Processing, 29(6), 1981.]
  """

  def __init__(self) -> None:
    super().__init__(name='catmullrom', radius=2.0)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    x = np.abs(x)
    v01 = ((1.5 * x - 2.5) * x) * x + 1.0
    v12 = ((-0.5 * x + 2.5) * x - 4.0) * x + 2.0
    return np.where(x < 1.0, v01, np.where(x < 2.0, v12, 0.0))


class LanczosKernel(Kernel):
  """High-quality kernel: sinc function modulated by a sinc window.

  Args:
    radius: Number of lobes `a`; the kernel is nonzero over the support window [-a, a].
    sampled: If True, use a discretized approximation for improved speed.

  See https://en.wikipedia.org/wiki/Lanczos_resampling.
  """

  def __init__(self, *, radius: int = 3, sampled: bool = False) -> None:
    if radius < 1 or radius != int(radius):
      raise ValueError(f'Lanczos radius {radius} is not a positive integer.')
    super().__init__(name='lanczos' if radius == 3 else f'lanczos{radius}', radius=radius)

    @_cache_sampled_1d_function(xmin=-radius, xmax=radius, enable=sampled)
    def _eval(x: _ArrayLike) -> _NDArray:
      x = np.abs(x)
      window = _sinc(x / radius)
      return np.where(x < radius, _sinc(x) * window, 0.0)

    self.function = _eval

  def __call__(self, x: _ArrayLike) -> _NDArray:
    return self.function(x)


_DEFAULT_KERNEL = 'linear'

_DICT_KERNELS: dict[str, Kernel] = {
    'nearest': NearestKernel(),
    'linear': LinearKernel(),
    'catmullrom': CatmullRomKernel(),
    'lanczos': LanczosKernel(),
}

KERNELS = list(_DICT_KERNELS)
r"""Names of the reconstruction kernels:

| name           | `Kernel`             | support radius | comments |
|----------------|----------------------|----------------|----------|
| `'nearest'`    | `NearestKernel()`    | (none)         | direct index mapping |
| `'linear'`     | `LinearKernel()`     | 1              | *bilinear* in 2D (default) |
| `'catmullrom'` | `CatmullRomKernel()` | 2              | *bicubic*, *keys* |
| `'lanczos'`    | `LanczosKernel()`    | 3              | windowed sinc with 3 lobes |
"""


def _get_kernel(kernel: str | Kernel) -> Kernel:
  """Return a `Kernel`, which can be specified as a name in `KERNELS`."""
  if isinstance(kernel, Kernel):
    if not isinstance(kernel, tuple(type(k) for k in _DICT_KERNELS.values())):
      raise UnknownKernelError(f'Kernel {kernel.name!r} is not one of {KERNELS}.')
    return kernel
  if isinstance(kernel, str) and kernel in _DICT_KERNELS:
    return _DICT_KERNELS[kernel]
  raise UnknownKernelError(f'Kernel {kernel!r} is not one of {KERNELS}.')


def _get_scale(scale: Any, name: str) -> float:
  """Return `scale` as a float after checking that it is finite and positive."""
  try:
    value = float(scale)
  except (TypeError, ValueError) as e:
    raise InvalidScaleError(f'Scale {name}={scale!r} is not a number.') from e
  if not (math.isfinite(value) and value > 0.0):
    raise InvalidScaleError(f'Scale {name}={scale!r} must be a finite number greater than zero.')
  return value


def _new_size(size: int, scale: float) -> int:
  """Return the number of samples on an axis of `size` samples resized by `scale`."""
  return int(math.floor(size * scale))


def _window_radius(scale: float, kernel: Kernel, antialias: bool) -> int:
  """Return the half-width, in source samples, of the window gathered for each output sample."""
  if antialias and scale < 1.0:
    return math.ceil(kernel.radius / scale)
  # The window scales with the forward factor, so it narrows when downsampling.
  return math.ceil(scale * kernel.radius)


def _create_resize_matrix(
    src_size: int,
    scale: float,
    kernel: Kernel,
    *,
    antialias: bool = False,
    dtype: Any = np.float64) -> tuple[scipy.sparse.csr_matrix, _NDArray]:
  """Compute the weights for 1D resampling of `src_size` samples by factor `scale`.

  Output sample `x` has ideal source location `ix = (x + 0.5) / scale - 0.5`.  Its row in the
  sparse matrix holds the weights `kernel(i - ix) / scale` of the source samples `i` in the window
  `[floor(ix - r + 0.5), ceil(ix + r))`, with `r = _window_radius(...)` and the window clamped to
  `[0, src_size]`.  Within each row, the entries are stored in ascending source index, which is
  the order in which they are accumulated.

  Args:
    src_size: The number of samples within the source 1D domain.
    scale: Ratio of the destination resolution to the source resolution; must be positive.
    kernel: The reconstruction kernel (any kernel other than `NearestKernel`).
    antialias: If True and `scale < 1`, widen the kernel by `1 / scale` to prefilter the source.
    dtype: Precision of computed resize matrix entries.

  Returns:
    resize_matrix: Sparse matrix of shape `(dst_size, src_size)` of unnormalized weights.
    src_float_index: Array of shape `(dst_size,)` of ideal source locations.
  """
  dst_size = _new_size(src_size, scale)
  inverse = 1.0 / scale
  src_float_index = (np.arange(dst_size, dtype=np.float64) + 0.5) * inverse - 0.5
  radius = _window_radius(scale, kernel, antialias)

  start = np.clip(np.floor(src_float_index - radius + 0.5), 0, src_size).astype(np.int64)
  end = np.clip(np.ceil(src_float_index + radius), 0, src_size).astype(np.int64)
  num_samples = end - start  # (dst_size,)
  num_taps = int(num_samples.max()) if dst_size else 0

  sample_index = np.arange(num_taps, dtype=np.int64)
  src_index = start[:, None] + sample_index  # (dst_size, num_taps)
  valid = sample_index < num_samples[:, None]
  x = (src_index - src_float_index[:, None])[valid]  # Row-major, so ascending within each row.
  if antialias and scale < 1.0:
    x = x * scale
  data = np.asarray(kernel(x), dtype=np.float64) / scale

  indptr = np.concatenate([[0], np.cumsum(num_samples)])
  resize_matrix = scipy.sparse.csr_matrix(
      (data.astype(dtype, copy=False), src_index[valid], indptr), shape=(dst_size, src_size))
  return resize_matrix, src_float_index


def _array_split(array: _NDArray, axis: int, num_sections: int) -> list[_NDArray]:
  """Split `array` into `num_sections` contiguous blocks along `axis`."""
  assert 0 <= axis < array.ndim
  assert 1 <= num_sections <= max(array.shape[axis], 1)
  # Adapted from https://github.com/numpy/numpy/blob/main/numpy/lib/shape_base.py#L739-L792.
  num_total = array.shape[axis]
  num_each, num_extra = divmod(num_total, num_sections)
  section_sizes = [0] + num_extra * [num_each + 1] + (num_sections - num_extra) * [num_each]
  div_points = np.array(section_sizes).cumsum()
  tmp = np.swapaxes(array, axis, 0)
  return [np.swapaxes(tmp[div_points[i]:div_points[i + 1]], axis, 0)
          for i in range(num_sections)]


def _map_function_over_blocks(blocks: Sequence[Any], func: Callable[[Any], Any],
                              num_threads: int = 1) -> list[Any]:
  """Apply `func` to each block, concurrently over `num_threads` threads if it exceeds 1."""
  if num_threads <= 1 or len(blocks) <= 1:
    return [func(block) for block in blocks]
  with concurrent.futures.ThreadPoolExecutor(max_workers=num_threads) as executor:
    return list(executor.map(func, blocks))


def _resize_axis(
    array: _NDArray,
    scale: float,
    kernel: Kernel,
    *,
    antialias: bool = False,
    num_threads: int = 1,
    debug: bool = False,
    name: str = 'axis') -> _NDArray:
  """Resample the first dimension of a `uint8` array of shape `(src_size, num_lines, channels)`.

  Each of the `num_lines * channels` columns is an independent 1D signal.  Each output value is
  the weighted mean of the source values in its window, rounded half-up and saturated to the
  range [0, 255].  With `num_threads > 1`, the lines are partitioned into contiguous blocks that
  are processed concurrently; the result does not depend on the partition.
  """
  src_size, num_lines, channels = array.shape
  dst_size = _new_size(src_size, scale)
  if dst_size == 0 or num_lines == 0:
    return np.zeros((dst_size, num_lines, channels), np.uint8)

  resize_matrix, src_float_index = _create_resize_matrix(
      src_size, scale, kernel, antialias=antialias)
  weight_sum = resize_matrix @ np.ones(src_size)
  has_weight = weight_sum != 0.0
  # Without any weight, the output copies the source sample nearest to its ideal location.
  fallback_index = np.clip(np.floor(src_float_index + 0.5), 0, src_size - 1).astype(np.int64)

  def resize_block(block: _NDArray) -> _NDArray:
    block_flat = block.reshape(src_size, -1)
    values = resize_matrix @ block_flat.astype(np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
      values = values / weight_sum[:, None]
    values = np.where(has_weight[:, None], values, block_flat[fallback_index])
    result = np.floor(values + 0.5).clip(0.0, 255.0).astype(np.uint8)
    return result.reshape(dst_size, *block.shape[1:])

  num_blocks = min(num_threads, num_lines)
  if debug:
    radius = _window_radius(scale, kernel, antialias)
    print(f'(resize: {name} pass {src_size} -> {dst_size} samples with {kernel.name!r},'
          f' window radius {radius}, {num_lines} lines in {num_blocks} block(s)).')
  blocks = _array_split(array, 1, num_blocks)
  result_blocks = _map_function_over_blocks(blocks, resize_block, num_threads)
  result = np.concatenate(result_blocks, axis=1)
  _check_eq(result.shape, (dst_size, num_lines, channels))
  return result


def _resize_separable(buffer: PixelBuffer, fx: float, fy: float, kernel: Kernel,
                      **kwargs: Any) -> _NDArray:
  """Resize with a horizontal pass over rows followed by a vertical pass over columns."""
  pixels = buffer.view()  # (height, width, channels), offset by the buffer origin.
  array = np.moveaxis(pixels, 1, 0)  # Each image row is a line of the horizontal pass.
  array = _resize_axis(array, fx, kernel, name='horizontal', **kwargs)
  array = np.moveaxis(array, 0, 1)  # (height, new_width, channels).
  return _resize_axis(array, fy, kernel, name='vertical', **kwargs)


def _nearest_index(src_size: int, scale: float) -> _NDArray:
  """Return for each output sample the index of the source sample copied by `NearestKernel`."""
  dst_size = _new_size(src_size, scale)
  index = np.floor(np.arange(dst_size, dtype=np.float64) / scale + 0.5)  # Round half up.
  # Upsampling by more than 2 would otherwise address one sample past the end.
  return np.clip(index, 0, max(src_size - 1, 0)).astype(np.int64)


def _resize_nearest(buffer: PixelBuffer, fx: float, fy: float, *, debug: bool = False,
                    **unused_kwargs: Any) -> _NDArray:
  """Resize by copying for each output sample the nearest source sample, in a single gather."""
  x0, y0 = buffer.origin
  src_x = _nearest_index(buffer.width, fx) + x0
  src_y = _nearest_index(buffer.height, fy) + y0
  if debug:
    print(f'(resize: nearest mapping {buffer.size} -> {(len(src_x), len(src_y))}).')
  return buffer.storage[src_y[:, None], src_x[None, :]]


def resize(
    buffer: PixelBuffer | _ArrayLike,
    fx: float,
    fy: float,
    kernel: str | Kernel = _DEFAULT_KERNEL,
    *,
    antialias: bool = False,
    num_threads: int = 1,
    debug: bool = False,
) -> PixelBuffer | _NDArray:
  """Resample the pixel grid `buffer` by horizontal factor `fx` and vertical factor `fy`.

  The output has resolution `(floor(width * fx), floor(height * fy))`, which may be zero along
  either axis, and the same number of channels as `buffer`.  Each channel (including alpha) is
  resampled independently.  The source is never modified.

  For `'nearest'`, each output sample `(x, y)` copies the source sample
  `(round(x / fx), round(y / fy))`, clamped to the source bounds.  For the other kernels, a
  horizontal pass first resamples every row to the new width, then a vertical pass resamples
  every column of that intermediate result to the new height.

  Args:
    buffer: Source samples, either a `PixelBuffer` or a `uint8` array of shape `(height, width)`,
      `(height, width, 1)`, or `(height, width, 4)`.
    fx: Horizontal scale factor; it must be a finite number greater than zero.
    fy: Vertical scale factor; it must be a finite number greater than zero.
    kernel: The reconstruction kernel, specified as either a name in `KERNELS` or an instance of
      one of the kernel classes.
    antialias: If True, the window of a downsampling pass is widened by the inverse scale
      (standard minification prefiltering).  If False, the window radius is
      `ceil(scale * kernel.radius)`, which narrows the window when downsampling.
    num_threads: Number of threads over which the rows (horizontal pass) and columns (vertical
      pass) are partitioned.  The result is identical for any value.
    debug: Show internal information.

  Returns:
    A new `PixelBuffer` with origin `(0, 0)` if `buffer` is a `PixelBuffer`, else a new `uint8`
    array with the same number of dimensions as `buffer`.

  Raises:
    InvalidScaleError: If `fx` or `fy` is not a finite number greater than zero.
    UnknownKernelError: If `kernel` is not one of `KERNELS`.

  >>> source = PixelBuffer.from_array(np.array([[0, 85, 170, 255]], np.uint8))
  >>> resize(source, 0.5, 1.0, 'nearest').to_array()
  array([[  0, 170]], dtype=uint8)
  >>> resize(np.array([[0, 100]], np.uint8), 2.0, 1.0, 'linear')
  array([[  0,  25,  75, 100]], dtype=uint8)
  """
  fx = _get_scale(fx, 'fx')
  fy = _get_scale(fy, 'fy')
  kernel = _get_kernel(kernel)
  if num_threads < 1:
    raise ValueError(f'Number of threads {num_threads} is less than 1.')
  is_array = not isinstance(buffer, PixelBuffer)
  source = PixelBuffer.from_array(buffer) if is_array else buffer
  array_ndim = np.ndim(buffer) if is_array else 3

  resizer = _resize_nearest if isinstance(kernel, NearestKernel) else _resize_separable
  pixels = resizer(source, fx, fy, kernel=kernel, antialias=antialias, num_threads=num_threads,
                   debug=debug)
  result = PixelBuffer.from_array(np.ascontiguousarray(pixels))
  if is_array:
    return result.to_array() if array_ndim == 2 else result.view()
  return result


def _num_channels(buffer: PixelBuffer | _ArrayLike) -> int:
  if isinstance(buffer, PixelBuffer):
    return buffer.channels
  return PixelBuffer.from_array(buffer).channels


def resize_gray(buffer: PixelBuffer | _ArrayLike, fx: float, fy: float,
                kernel: str | Kernel = _DEFAULT_KERNEL, **kwargs: Any) -> Any:
  """Resize a single-channel (luminance) buffer; see `resize`."""
  channels = _num_channels(buffer)
  if channels != GRAY:
    raise ValueError(f'Buffer has {channels} channels rather than {GRAY}.')
  return resize(buffer, fx, fy, kernel, **kwargs)


def resize_rgba(buffer: PixelBuffer | _ArrayLike, fx: float, fy: float,
                kernel: str | Kernel = _DEFAULT_KERNEL, **kwargs: Any) -> Any:
  """Resize a four-channel (red, green, blue, alpha) buffer; see `resize`."""
  channels = _num_channels(buffer)
  if channels != RGBA:
    raise ValueError(f'Buffer has {channels} channels rather than {RGBA}.')
  return resize(buffer, fx, fy, kernel, **kwargs)
