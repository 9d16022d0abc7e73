"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app

Keep a single worker: each worker owns its own I/O executor, and one
writer per database is what keeps list mutations serialized.
"""

from pagingsample import create_app

app = create_app()
