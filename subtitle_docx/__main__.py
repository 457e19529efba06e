"""Package entry point for ``python -m subtitle_docx``.

WHY: Users run the converter as ``python -m subtitle_docx a.srt b.vtt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function. ``--serve`` starts the HTTP
API instead.
"""

import sys

from subtitle_docx.cli import main, serve

if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    else:
        main()
