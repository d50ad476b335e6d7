from importlib import metadata

try:
    __version__ = metadata.version("phrasebook")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from phrasebook import __version__
