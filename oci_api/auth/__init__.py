from ._key_loader import KeyMaterialLoader as KeyMaterialLoader
from ._signer import DEFAULT_CONTENT_TYPE as DEFAULT_CONTENT_TYPE
from ._signer import RequestSigner as RequestSigner
from ._signer import body_sha256 as body_sha256
from ._signer import build_authorization_header as build_authorization_header
from ._signer import build_signing_string as build_signing_string
from ._signer import format_http_date as format_http_date
from ._signer import signed_header_names as signed_header_names
from ._signing_key import EphemeralKeyFile as EphemeralKeyFile
from ._signing_key import SigningKeyHandle as SigningKeyHandle
from ._signing_key import SigningKeyProvider as SigningKeyProvider
from ._signing_key import read_pkcs8_pem_file as read_pkcs8_pem_file
