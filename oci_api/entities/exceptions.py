class OciError(Exception):
    category = "OCI error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.category}: {message}")


class ConfigError(OciError):
    """Malformed or unparseable configuration, including private keys that cannot be parsed."""
    category = "Configuration error"


class IniError(ConfigError):
    category = "INI file parsing error"


class EnvError(OciError):
    category = "Environment variable error"


class AuthError(OciError):
    """Signing failed, or the key handle used for signing is no longer usable."""
    category = "Authentication error"


class PrivateKeyError(OciError):
    """Private key file missing or unreadable, or PEM framing is invalid."""
    category = "Private key error"


class HttpError(OciError):
    category = "HTTP error"


class ApiError(OciError):
    """Error returned by an OCI API (non-2xx response)."""
    category = "API error"

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        Exception.__init__(self, f"{self.category} (code: {code}): {message}")
