"""zero2prod: a newsletter service with a health check and a subscription form."""

from importlib import metadata

try:
    __version__ = metadata.version("zero2prod")
except metadata.PackageNotFoundError:
    __version__ = "0.1.0"
