from typing import NamedTuple


class SignedHeaders(NamedTuple):
    date: str
    authorization: str
