"""dsesh: launch terminal sessions declared in Sesh-compatible TOML configs."""

__version__ = "1.1"
