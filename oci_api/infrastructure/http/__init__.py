from ._client import OciClient as OciClient
from ._client import service_host as service_host
