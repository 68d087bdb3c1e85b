"""Weather Gateway API App"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weather-gateway")
except PackageNotFoundError:
    __version__ = "dev"
