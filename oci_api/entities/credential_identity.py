from dataclasses import dataclass


@dataclass(frozen=True)
class CredentialIdentity:
    """
    Identity triple used to build the ``keyId`` of the Authorization header.

    The server uses the key id to locate the public key matching the private
    key the request was signed with.
    """
    tenancy_id: str
    user_id: str
    fingerprint: str

    @property
    def key_id(self) -> str:
        return f"{self.tenancy_id}/{self.user_id}/{self.fingerprint}"
