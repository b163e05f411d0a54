#!/usr/bin/env python3
"""Create HTML documentation from the source code using `pdoc`."""
# Note: Invoke this from the parent directory as "python3 pdoc_files/make.py".

import pathlib
import re

import pdoc

MODULE_NAME = 'pixresample'
FOOTER_TEXT = ''
TEMPLATE_DIRECTORY = pathlib.Path('./pdoc_files')
OUTPUT_DIRECTORY = pathlib.Path('./pdoc_files/html')
APPLY_POSTPROCESS = True


def main() -> None:
  """Invoke `pdoc` on the module source files."""
  pdoc.render.configure(
      docformat='google',
      edit_url_map=None,
      footer_text=FOOTER_TEXT,
      math=True,
      search=True,
      show_source=True,
      template_directory=TEMPLATE_DIRECTORY,
  )

  pdoc.pdoc(
      f'./{MODULE_NAME}',
      output_directory=OUTPUT_DIRECTORY,
  )

  if APPLY_POSTPROCESS:
    output_file = OUTPUT_DIRECTORY / f'{MODULE_NAME}.html'
    text = output_file.read_text()

    # collections.abc.* -> * (Callable, Sequence).
    text = text.replace(
        (
            '<span class="n">collections</span><span class="o">'
            '.</span><span class="n">abc</span><span class="o">.</span>'
        ),
        '',
    )

    # typing.* -> * (e.g. typing.Any).
    text = text.replace(
        '<span class="n">typing</span><span class="o">.</span>',
        '',
    )

    # Deal with the private aliases "_ArrayLike" and "_NDArray".
    for src, dst in [('ArrayLike', None), ('NDArray', 'np.ndarray')]:
      dst = dst or src
      text = re.sub(
          rf'(?s)<span class="o">~</span>\s*<span class="n">_{src}<',
          rf'<span class="n">{dst}<',
          text,
      )
      text = text.replace(f'~_{src}', dst)

    # pixresample.PixelBuffer, pixresample.Kernel, etc. -> PixelBuffer, Kernel, etc.
    text = re.sub(r'pixresample\.([A-Z][A-Za-z]+)', r'\1', text)

    output_file.write_text(text)


if __name__ == '__main__':
  main()
