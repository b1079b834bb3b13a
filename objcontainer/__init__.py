from .config import ContainerConfig
from .containers import Container
from .reports import ContainerError, InvalidKeyError
from .version import __version__
