from importlib.metadata import PackageNotFoundError, version

try:
    version = version("JListScan")
except PackageNotFoundError:
    version = "0.0.0"
