from .credential_identity import CredentialIdentity as CredentialIdentity
from .signed_headers import SignedHeaders as SignedHeaders
from .exceptions import OciError, ConfigError, IniError, EnvError, AuthError, PrivateKeyError, HttpError, ApiError
