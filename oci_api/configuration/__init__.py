from .properties import AppConfig as AppConfig
from .properties import FileLoggingConfig as FileLoggingConfig
from .properties import LoggingConfig as LoggingConfig
from .properties import OciConfig as OciConfig
from .properties import OciProfileConfig as OciProfileConfig
from ._loader import DEFAULT_PROFILE as DEFAULT_PROFILE
from ._loader import ConfigLoader as ConfigLoader
from ._loader import PartialOciConfig as PartialOciConfig
