"""AnyBackend: Express + MongoDB backend scaffolding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("anybackend")
except PackageNotFoundError:
    __version__ = "0.0.0"
